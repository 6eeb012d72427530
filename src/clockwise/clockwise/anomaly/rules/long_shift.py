from __future__ import annotations

from datetime import timedelta, tzinfo
from typing import Optional

from ...core.constants import MAX_SHIFT_HOURS
from ...core.enums import AnomalyType
from ..model import ShiftInput
from .base import RuleHit, ShiftRule


class LongShiftRule(ShiftRule):
    """Shift strictly longer than the maximum (exactly 9h is fine)."""

    def __init__(self, max_hours: float = MAX_SHIFT_HOURS):
        self._max_hours = float(max_hours)

    def check(self, shift: ShiftInput, *, local_tz: tzinfo) -> Optional[RuleHit]:
        if shift.duration <= timedelta(hours=self._max_hours):
            return None
        return RuleHit(
            anomaly_type=AnomalyType.LONG_SHIFT.value,
            explanation=(
                f"The shift lasted {shift.duration_hours:.1f} hours, "
                f"which exceeds the {self._max_hours:g}-hour maximum."
            ),
        )
