from __future__ import annotations

import logging
import time
import uuid
from datetime import timezone, tzinfo
from typing import Any, Callable, Mapping, Optional

from ..anomaly.classifier import AnomalyClassifier
from ..anomaly.model import ShiftInput
from ..common.validators import require_non_empty, require_timestamp
from ..core.constants import LOG_ID_PREFIX
from ..core.exceptions import ClassificationError, NotFoundError, ValidationError
from ..employees.repository import EmployeeDirectory
from .model import AnomalyDetail, ClockingLog

logger = logging.getLogger(__name__)


def new_log_id() -> str:
    """Unique id that sorts by creation time: log_<ns timestamp>_<random>."""
    return f"{LOG_ID_PREFIX}{time.time_ns()}_{uuid.uuid4().hex[:6]}"


class ClockingEventRecorder:
    """Turns a raw clock-in/clock-out submission into a classified log.

    The recorder does not persist anything: the returned log is handed to a
    store by the caller. Every failure is terminal for the submission.
    """

    def __init__(
        self,
        directory: EmployeeDirectory,
        classifier: AnomalyClassifier,
        *,
        local_tz: tzinfo = timezone.utc,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self._directory = directory
        self._classifier = classifier
        self._local_tz = local_tz
        self._new_id = id_factory or new_log_id

    def record(self, request: Mapping[str, Any]) -> ClockingLog:
        if not isinstance(request, Mapping):
            raise ValidationError("Invalid form data")

        # 1. Validate shape before touching any collaborator.
        employee_id = require_non_empty(request.get("employeeId"), "employeeId")
        clock_in = require_timestamp(request.get("clockInTime"), "clockInTime", local_tz=self._local_tz)
        clock_out = require_timestamp(request.get("clockOutTime"), "clockOutTime", local_tz=self._local_tz)

        # 2. Resolve employee.
        employee = self._directory.find(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")

        if clock_out <= clock_in:
            logger.warning("Clock-out is not after clock-in for employee %s", employee_id)

        # 3-4. Timestamps are already UTC; classify synchronously.
        shift = ShiftInput(employee_id=employee_id, clock_in=clock_in, clock_out=clock_out)
        try:
            verdict = self._classifier.classify(shift)
        except ClassificationError:
            raise
        except Exception as exc:
            logger.exception("Anomaly classifier crashed for employee %s", employee_id)
            raise ClassificationError("Failed to analyze clocking data") from exc

        # 5. Assemble.
        log = ClockingLog(
            log_id=self._new_id(),
            employee_id=employee_id,
            employee_name=employee.name,
            clock_in_time=clock_in,
            clock_out_time=clock_out,
            anomaly=AnomalyDetail.from_verdict(verdict),
        )

        if log.anomaly:
            logger.warning(
                "Anomaly detected for %s (%s): %s", employee.name, log.anomaly.anomaly_type, log.anomaly.explanation
            )
        logger.info("Recorded clocking log %s for employee %s", log.log_id, employee_id)
        return log
