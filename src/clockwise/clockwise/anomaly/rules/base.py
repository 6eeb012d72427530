from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import tzinfo
from typing import Optional

from ..model import ShiftInput


@dataclass(frozen=True)
class RuleHit:
    anomaly_type: str
    explanation: str


class ShiftRule(ABC):
    """Strategy Pattern: one condition that can flag a shift as anomalous."""

    @abstractmethod
    def check(self, shift: ShiftInput, *, local_tz: tzinfo) -> Optional[RuleHit]:
        raise NotImplementedError
