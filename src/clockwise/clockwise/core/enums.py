from __future__ import annotations

from enum import Enum


class EmployeeStatus(str, Enum):
    """Trạng thái nhân viên trong danh bạ.

    PENDING: đã có trong danh bạ nhưng chưa đăng ký vân tay.
    """

    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"


class AnomalyType(str, Enum):
    """Common anomaly categories produced by the rule-based classifier.

    Hosted backends may return close variants ("Unusually Short Shift"), so
    stored logs keep the label as free text.
    """

    SHORT_SHIFT = "Short Shift"
    LONG_SHIFT = "Long Shift"
    LATE_START = "Late Start"
    EARLY_FINISH = "Early Finish"


class ClassifierBackend(str, Enum):
    RULES = "rules"
    HOSTED = "hosted"
