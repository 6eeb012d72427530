from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..anomaly.model import AnomalyVerdict
from ..common.datetime_utils import hours_between, to_iso_utc


@dataclass(frozen=True)
class AnomalyDetail:
    """Anomaly attached to a log; only present when the verdict was positive."""

    explanation: str
    anomaly_type: Optional[str] = None

    @classmethod
    def from_verdict(cls, verdict: AnomalyVerdict) -> Optional["AnomalyDetail"]:
        if not verdict.is_anomaly:
            return None
        return cls(explanation=verdict.explanation, anomaly_type=verdict.anomaly_type)

    def to_dict(self) -> dict:
        return {"isAnomaly": True, "type": self.anomaly_type, "explanation": self.explanation}


@dataclass(frozen=True)
class ClockingLog:
    """Thực thể miền (domain): Bản ghi chấm công.

    employee_name is a snapshot taken when the log was recorded and does not
    follow later renames. A log without clock_out_time means "on duty".
    """

    log_id: str
    employee_id: str
    employee_name: str
    clock_in_time: datetime
    clock_out_time: Optional[datetime]
    anomaly: Optional[AnomalyDetail] = None

    @property
    def on_duty(self) -> bool:
        return self.clock_out_time is None

    @property
    def duration_hours(self) -> Optional[float]:
        if self.clock_out_time is None:
            return None
        return hours_between(self.clock_in_time, self.clock_out_time)

    def to_dict(self) -> dict:
        return {
            "id": self.log_id,
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "clockInTime": to_iso_utc(self.clock_in_time),
            "clockOutTime": to_iso_utc(self.clock_out_time) if self.clock_out_time else None,
            "anomaly": self.anomaly.to_dict() if self.anomaly else None,
        }
