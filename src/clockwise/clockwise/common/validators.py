from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Any, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_timestamp


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_timestamp(value: Any, field_name: str, *, local_tz: Optional[tzinfo] = None) -> datetime:
    text = require_non_empty(value, field_name)
    try:
        return parse_timestamp(text, local_tz=local_tz)
    except (ValueError, OverflowError):
        raise ValidationError(f"{field_name} is not a valid timestamp: {text!r}")


def optional_text(value: Any, field_name: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return value.strip() or None
