from __future__ import annotations

from datetime import time, tzinfo
from typing import Optional

from ...core.constants import EARLIEST_CLOCK_OUT
from ...core.enums import AnomalyType
from ..model import ShiftInput
from .base import RuleHit, ShiftRule


class EarlyFinishRule(ShiftRule):
    """Clock-out local time earlier than the end of the working day."""

    def __init__(self, earliest_clock_out: time = EARLIEST_CLOCK_OUT):
        self._earliest = earliest_clock_out

    def check(self, shift: ShiftInput, *, local_tz: tzinfo) -> Optional[RuleHit]:
        local_out = shift.clock_out.astimezone(local_tz)
        if local_out.time() >= self._earliest:
            return None
        return RuleHit(
            anomaly_type=AnomalyType.EARLY_FINISH.value,
            explanation=(
                f"The employee clocked out at {local_out:%H:%M}, "
                f"which is earlier than the {self._earliest:%H:%M} finish time."
            ),
        )
