from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_datetime, to_mysql_datetime
from .model import AnomalyDetail, ClockingLog
from .repository import ClockingLogStore

_SELECT = """
    SELECT log_id, employee_id, employee_name, clock_in_time, clock_out_time,
           is_anomaly, anomaly_type, anomaly_explanation
    FROM clocking_logs
"""


def _row_to_log(r: dict) -> ClockingLog:
    anomaly: Optional[AnomalyDetail] = None
    if r.get("is_anomaly"):
        anomaly = AnomalyDetail(explanation=r.get("anomaly_explanation") or "", anomaly_type=r.get("anomaly_type"))
    return ClockingLog(
        log_id=r["log_id"],
        employee_id=str(r["employee_id"]),
        employee_name=r["employee_name"],
        clock_in_time=normalize_mysql_datetime(r["clock_in_time"]),
        clock_out_time=normalize_mysql_datetime(r.get("clock_out_time")),
        anomaly=anomaly,
    )


class MySQLClockingLogStore(ClockingLogStore):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def add(self, log: ClockingLog) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO clocking_logs(
                    log_id, employee_id, employee_name, clock_in_time, clock_out_time,
                    is_anomaly, anomaly_type, anomaly_explanation
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    log.log_id,
                    log.employee_id,
                    log.employee_name,
                    to_mysql_datetime(log.clock_in_time),
                    to_mysql_datetime(log.clock_out_time),
                    1 if log.anomaly else 0,
                    log.anomaly.anomaly_type if log.anomaly else None,
                    log.anomaly.explanation if log.anomaly else None,
                ),
            )

    def list_recent(self, limit: int) -> Sequence[ClockingLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY seq DESC LIMIT %s", (int(limit),))
            return [_row_to_log(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[ClockingLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY seq DESC")
            return [_row_to_log(r) for r in fetchall(cur)]

    def count_on_duty(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM clocking_logs WHERE clock_out_time IS NULL")
            row = fetchone(cur)
            return int(row["n"]) if row else 0

    def count_anomalies_since(self, since: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT COUNT(*) AS n FROM clocking_logs WHERE is_anomaly=1 AND clock_in_time >= %s",
                (to_mysql_datetime(since),),
            )
            row = fetchone(cur)
            return int(row["n"]) if row else 0
