from __future__ import annotations

from datetime import timedelta, tzinfo
from typing import Optional

from ...core.constants import MIN_SHIFT_HOURS
from ...core.enums import AnomalyType
from ..model import ShiftInput
from .base import RuleHit, ShiftRule


class ShortShiftRule(ShiftRule):
    """Shift strictly shorter than the minimum (exactly 6h is fine)."""

    def __init__(self, min_hours: float = MIN_SHIFT_HOURS):
        self._min_hours = float(min_hours)

    def check(self, shift: ShiftInput, *, local_tz: tzinfo) -> Optional[RuleHit]:
        if shift.duration >= timedelta(hours=self._min_hours):
            return None
        return RuleHit(
            anomaly_type=AnomalyType.SHORT_SHIFT.value,
            explanation=(
                f"The shift lasted {shift.duration_hours:.1f} hours, "
                f"which is shorter than the {self._min_hours:g}-hour minimum."
            ),
        )
