from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def to_mysql_datetime(value: Optional[datetime]) -> Optional[datetime]:
    """Aware datetime -> naive UTC value for a DATETIME column."""
    if value is None:
        return None
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def normalize_mysql_datetime(value: Any) -> Optional[datetime]:
    """Normalize MySQL DATETIME values (stored as UTC) to aware datetimes.

    mysql-connector can return DATETIME as:
    - datetime.datetime (naive)
    - string (e.g. '2024-07-30 09:01:00') with the pure-Python connector
    """

    if value is None:
        return None

    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip())

    if not isinstance(value, datetime):
        raise TypeError(f"Unsupported MySQL DATETIME value type: {type(value)!r}")

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
