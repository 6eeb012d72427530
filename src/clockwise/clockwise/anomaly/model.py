from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Optional

from ..common.datetime_utils import hours_between, to_iso_utc
from ..core.exceptions import ClassificationError

# Sentence end followed by more text, e.g. "Too short. Also late."
_SENTENCE_BREAK = re.compile(r"[.!?]\s+\S")


@dataclass(frozen=True)
class ShiftInput:
    """A resolved clock-in/clock-out pair handed to a classifier.

    Both timestamps are aware datetimes normalized to UTC.
    """

    employee_id: str
    clock_in: datetime
    clock_out: datetime

    @property
    def duration(self) -> timedelta:
        return self.clock_out - self.clock_in

    @property
    def duration_hours(self) -> float:
        return hours_between(self.clock_in, self.clock_out)

    def to_request(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "clockInTime": to_iso_utc(self.clock_in),
            "clockOutTime": to_iso_utc(self.clock_out),
        }


@dataclass(frozen=True)
class AnomalyVerdict:
    """Value object: kết quả phân loại một ca làm việc."""

    is_anomaly: bool
    explanation: str
    anomaly_type: Optional[str] = None

    @classmethod
    def normal(cls, explanation: str) -> "AnomalyVerdict":
        return cls(is_anomaly=False, explanation=explanation)

    @classmethod
    def anomalous(cls, anomaly_type: str, explanation: str) -> "AnomalyVerdict":
        return cls(is_anomaly=True, explanation=explanation, anomaly_type=anomaly_type)

    @classmethod
    def from_response(cls, payload: Any) -> "AnomalyVerdict":
        """Validate a classifier response against the verdict schema.

        Expected shape: ``{"isAnomaly": bool, "anomalyType"?: str, "explanation": str}``.
        Any deviation raises ClassificationError instead of being guessed.
        """
        if not isinstance(payload, dict):
            raise ClassificationError("Classifier response must be a JSON object")

        is_anomaly = payload.get("isAnomaly")
        if not isinstance(is_anomaly, bool):
            raise ClassificationError("Classifier response field 'isAnomaly' must be a boolean")

        explanation = payload.get("explanation")
        if not isinstance(explanation, str) or not explanation.strip():
            raise ClassificationError("Classifier response field 'explanation' must be a non-empty string")
        if _SENTENCE_BREAK.search(explanation.strip()):
            raise ClassificationError("Classifier response field 'explanation' must be a single sentence")

        if not is_anomaly:
            return cls.normal(explanation.strip())

        anomaly_type = payload.get("anomalyType")
        if not isinstance(anomaly_type, str) or not anomaly_type.strip():
            raise ClassificationError("Classifier response field 'anomalyType' is required for anomalies")
        if not 2 <= len(anomaly_type.split()) <= 3:
            raise ClassificationError(f"Anomaly type must be 2-3 words, got {anomaly_type!r}")

        return cls.anomalous(anomaly_type.strip(), explanation.strip())

    def to_dict(self) -> dict:
        out: dict = {"isAnomaly": self.is_anomaly, "explanation": self.explanation}
        if self.anomaly_type:
            out["anomalyType"] = self.anomaly_type
        return out
