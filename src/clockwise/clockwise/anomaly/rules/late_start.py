from __future__ import annotations

from datetime import time, tzinfo
from typing import Optional

from ...core.constants import LATEST_CLOCK_IN
from ...core.enums import AnomalyType
from ..model import ShiftInput
from .base import RuleHit, ShiftRule


class LateStartRule(ShiftRule):
    """Clock-in local time later than the cutoff."""

    def __init__(self, latest_clock_in: time = LATEST_CLOCK_IN):
        self._latest = latest_clock_in

    def check(self, shift: ShiftInput, *, local_tz: tzinfo) -> Optional[RuleHit]:
        local_in = shift.clock_in.astimezone(local_tz)
        if local_in.time() <= self._latest:
            return None
        return RuleHit(
            anomaly_type=AnomalyType.LATE_START.value,
            explanation=(
                f"The employee clocked in at {local_in:%H:%M}, "
                f"which is later than the {self._latest:%H:%M} start cutoff."
            ),
        )
