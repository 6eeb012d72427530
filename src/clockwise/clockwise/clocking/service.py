from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import now_utc
from ..core.constants import ANOMALY_WINDOW_HOURS, DEFAULT_RECENT_LOGS_LIMIT
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeDirectory
from .export import logs_to_csv
from .model import ClockingLog
from .recorder import ClockingEventRecorder
from .repository import ClockingLogStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardStats:
    total_employees: int
    on_duty: int
    anomalies_last_24h: int

    def to_dict(self) -> dict:
        return {
            "totalEmployees": self.total_employees,
            "onDuty": self.on_duty,
            "anomalies": self.anomalies_last_24h,
        }


class ClockingService:
    """Use case: record clocking events and serve dashboard read models."""

    def __init__(
        self,
        recorder: ClockingEventRecorder,
        store: ClockingLogStore,
        directory: EmployeeDirectory,
        *,
        local_tz: tzinfo = timezone.utc,
    ):
        self._recorder = recorder
        self._store = store
        self._directory = directory
        self._local_tz = local_tz

    def submit(self, request: Mapping[str, Any]) -> ClockingLog:
        """Record + persist. Nothing is stored when recording fails."""
        log = self._recorder.record(request)
        self._store.add(log)
        return log

    def recent_logs(self, limit: int = DEFAULT_RECENT_LOGS_LIMIT) -> Sequence[ClockingLog]:
        if int(limit) <= 0:
            raise ValidationError("limit must be positive")
        return self._store.list_recent(int(limit))

    def all_logs(self) -> Sequence[ClockingLog]:
        return self._store.list_all()

    def stats(self, *, now: Optional[datetime] = None) -> DashboardStats:
        now = now or now_utc()
        since = now - timedelta(hours=ANOMALY_WINDOW_HOURS)
        return DashboardStats(
            total_employees=len(self._directory.list_all()),
            on_duty=self._store.count_on_duty(),
            anomalies_last_24h=self._store.count_anomalies_since(since),
        )

    def export_csv(self) -> str:
        logs = self._store.list_all()
        logger.info("Exporting %d clocking logs to CSV", len(logs))
        return logs_to_csv(logs, local_tz=self._local_tz)

    def get_history_ui(self, *, limit: int = DEFAULT_RECENT_LOGS_LIMIT) -> list[dict]:
        return [self._to_ui(log) for log in self.recent_logs(limit)]

    def _to_ui(self, log: ClockingLog) -> dict:
        duration = log.duration_hours
        row = log.to_dict()
        row["duration"] = "On Duty" if duration is None else f"{duration:.1f} hours"
        row["badge"] = (log.anomaly.anomaly_type or "Anomaly") if log.anomaly else "Normal"
        return row
