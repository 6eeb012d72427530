from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import timezone, tzinfo
from typing import Optional, Sequence

from .model import AnomalyVerdict, ShiftInput
from .rules.base import ShiftRule
from .rules.early_finish import EarlyFinishRule
from .rules.late_start import LateStartRule
from .rules.long_shift import LongShiftRule
from .rules.short_shift import ShortShiftRule


class AnomalyClassifier(ABC):
    """Decides whether a single shift is anomalous."""

    @abstractmethod
    def classify(self, shift: ShiftInput) -> AnomalyVerdict:
        raise NotImplementedError


def default_rules() -> list[ShiftRule]:
    # Order is precedence: duration rules win over start/end time rules.
    return [ShortShiftRule(), LongShiftRule(), LateStartRule(), EarlyFinishRule()]


class RuleBasedClassifier(AnomalyClassifier):
    """Deterministic classifier: the first rule that fires names the anomaly."""

    def __init__(self, rules: Optional[Sequence[ShiftRule]] = None, *, local_tz: tzinfo = timezone.utc):
        self._rules = list(rules) if rules is not None else default_rules()
        self._local_tz = local_tz

    def classify(self, shift: ShiftInput) -> AnomalyVerdict:
        for rule in self._rules:
            hit = rule.check(shift, local_tz=self._local_tz)
            if hit:
                return AnomalyVerdict.anomalous(hit.anomaly_type, hit.explanation)

        return AnomalyVerdict.normal(
            f"The {shift.duration_hours:.1f}-hour shift started and finished within "
            "standard working hours, so it is a normal shift."
        )
