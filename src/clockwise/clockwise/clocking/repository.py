from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import ClockingLog


class ClockingLogStore(Protocol):
    """Durable storage for finished clocking logs (newest first on reads)."""

    def add(self, log: ClockingLog) -> None:
        raise NotImplementedError

    def list_recent(self, limit: int) -> Sequence[ClockingLog]:
        raise NotImplementedError

    def list_all(self) -> Sequence[ClockingLog]:
        raise NotImplementedError

    def count_on_duty(self) -> int:
        raise NotImplementedError

    def count_anomalies_since(self, since: datetime) -> int:
        raise NotImplementedError
