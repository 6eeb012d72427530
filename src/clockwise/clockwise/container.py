from __future__ import annotations

from dataclasses import dataclass
from datetime import timezone, tzinfo
from typing import Any, Optional

from .anomaly.classifier import AnomalyClassifier
from .anomaly.factory import ClassifierFactory
from .clocking.mysql_clocking_repository import MySQLClockingLogStore
from .clocking.recorder import ClockingEventRecorder
from .clocking.repository import ClockingLogStore
from .clocking.service import ClockingService
from .common.datetime_utils import get_timezone
from .core.constants import DEFAULT_CLASSIFIER_TIMEOUT_SECONDS, DEFAULT_LOCAL_TIMEZONE
from .database.connection import DatabaseConnection, DBConfig
from .employees.mysql_employee_repository import MySQLEmployeeDirectory
from .employees.repository import EmployeeDirectory
from .employees.service import EmployeeService


@dataclass(frozen=True)
class Container:
    directory: EmployeeDirectory
    log_store: ClockingLogStore
    classifier: AnomalyClassifier

    recorder: ClockingEventRecorder
    employee_service: EmployeeService
    clocking_service: ClockingService


def wire_container(
    *,
    directory: EmployeeDirectory,
    log_store: ClockingLogStore,
    classifier: AnomalyClassifier,
    local_tz: tzinfo = timezone.utc,
) -> Container:
    recorder = ClockingEventRecorder(directory, classifier, local_tz=local_tz)
    return Container(
        directory=directory,
        log_store=log_store,
        classifier=classifier,
        recorder=recorder,
        employee_service=EmployeeService(directory),
        clocking_service=ClockingService(recorder, log_store, directory, local_tz=local_tz),
    )


def build_classifier(settings: Any, *, local_tz: tzinfo) -> AnomalyClassifier:
    factory = ClassifierFactory(
        local_tz=local_tz,
        url=getattr(settings, "CLASSIFIER_URL", None),
        api_key=getattr(settings, "CLASSIFIER_API_KEY", None),
        timeout=float(getattr(settings, "CLASSIFIER_TIMEOUT_SECONDS", DEFAULT_CLASSIFIER_TIMEOUT_SECONDS)),
    )
    return factory.create(getattr(settings, "CLASSIFIER_BACKEND", "rules"))


def build_container(*, db_config: dict, settings: Any, classifier: Optional[AnomalyClassifier] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    local_tz = get_timezone(getattr(settings, "LOCAL_TIMEZONE", DEFAULT_LOCAL_TIMEZONE))

    return wire_container(
        directory=MySQLEmployeeDirectory(conn),
        log_store=MySQLClockingLogStore(conn),
        classifier=classifier or build_classifier(settings, local_tz=local_tz),
        local_tz=local_tz,
    )
