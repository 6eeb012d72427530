from __future__ import annotations

import csv
import io
from datetime import datetime, timezone, tzinfo
from typing import Iterable, Optional

from .model import ClockingLog

CSV_HEADERS = [
    "Employee ID",
    "Employee Name",
    "Clock In",
    "Clock Out",
    "Duration (hours)",
    "Is Anomaly",
    "Anomaly Type",
    "Explanation",
]


def _fmt(value: Optional[datetime], local_tz: tzinfo) -> str:
    if value is None:
        return "N/A"
    return value.astimezone(local_tz).strftime("%Y-%m-%d %H:%M:%S")


def log_to_csv_row(log: ClockingLog, *, local_tz: tzinfo = timezone.utc) -> list[str]:
    duration = log.duration_hours
    return [
        log.employee_id,
        log.employee_name,
        _fmt(log.clock_in_time, local_tz),
        _fmt(log.clock_out_time, local_tz),
        f"{duration:.2f}" if duration is not None else "N/A",
        "Yes" if log.anomaly else "No",
        (log.anomaly.anomaly_type if log.anomaly else None) or "N/A",
        log.anomaly.explanation if log.anomaly else "N/A",
    ]


def logs_to_csv(logs: Iterable[ClockingLog], *, local_tz: tzinfo = timezone.utc) -> str:
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for log in logs:
        writer.writerow(log_to_csv_row(log, local_tz=local_tz))
    return out.getvalue()


def export_filename(now: datetime) -> str:
    return f"clockwise_logs_{now.strftime('%Y%m%dT%H%M%SZ')}.csv"
