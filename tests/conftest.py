from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

import pytest

from src.clockwise.clockwise.anomaly.classifier import AnomalyClassifier, RuleBasedClassifier
from src.clockwise.clockwise.anomaly.model import AnomalyVerdict, ShiftInput
from src.clockwise.clockwise.clocking.model import ClockingLog
from src.clockwise.clockwise.container import wire_container
from src.clockwise.clockwise.core.enums import EmployeeStatus
from src.clockwise.clockwise.employees.model import Employee


class InMemoryDirectory:
    def __init__(self, employees=()):
        self._by_id: dict[str, Employee] = {e.employee_id: e for e in employees}
        self._id = 100

    def find(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def list_all(self):
        return list(self._by_id.values())

    def create(self, *, name: str, status: EmployeeStatus, fingerprint_id: Optional[str] = None) -> Employee:
        self._id += 1
        emp = Employee(employee_id=str(self._id), name=name, status=status, fingerprint_id=fingerprint_id)
        self._by_id[emp.employee_id] = emp
        return emp

    def set_status(self, employee_id: str, *, status: EmployeeStatus) -> bool:
        emp = self._by_id.get(employee_id)
        if not emp:
            return False
        self._by_id[employee_id] = Employee(emp.employee_id, emp.name, status, emp.fingerprint_id)
        return True

    def set_fingerprint(self, employee_id: str, *, fingerprint_id: str) -> bool:
        emp = self._by_id.get(employee_id)
        if not emp:
            return False
        self._by_id[employee_id] = Employee(emp.employee_id, emp.name, emp.status, fingerprint_id)
        return True

    def delete(self, employee_id: str) -> bool:
        return self._by_id.pop(employee_id, None) is not None

    def rename(self, employee_id: str, name: str) -> None:
        emp = self._by_id[employee_id]
        self._by_id[employee_id] = Employee(emp.employee_id, name, emp.status, emp.fingerprint_id)


class InMemoryLogStore:
    def __init__(self):
        self.logs: list[ClockingLog] = []

    def add(self, log: ClockingLog) -> None:
        self.logs.insert(0, log)

    def list_recent(self, limit: int):
        return self.logs[:limit]

    def list_all(self):
        return list(self.logs)

    def count_on_duty(self) -> int:
        return sum(1 for log in self.logs if log.clock_out_time is None)

    def count_anomalies_since(self, since: datetime) -> int:
        return sum(1 for log in self.logs if log.anomaly and log.clock_in_time >= since)


class SpyClassifier(AnomalyClassifier):
    """Wraps the rule-based classifier and records every call."""

    def __init__(self, inner: Optional[AnomalyClassifier] = None, *, error: Optional[Exception] = None):
        self.calls: list[ShiftInput] = []
        self._inner = inner or RuleBasedClassifier()
        self._error = error

    def classify(self, shift: ShiftInput) -> AnomalyVerdict:
        self.calls.append(shift)
        if self._error:
            raise self._error
        return self._inner.classify(shift)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 7, 30, 18, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def employees() -> list[Employee]:
    return [
        Employee("1", "Alice Johnson", EmployeeStatus.ACTIVE, "fp_1"),
        Employee("2", "Bob Williams", EmployeeStatus.PENDING, None),
        Employee("3", "Charlie Brown", EmployeeStatus.ACTIVE, "fp_3"),
        Employee("4", "Diana Miller", EmployeeStatus.INACTIVE, "fp_4"),
    ]


@pytest.fixture
def directory(employees) -> InMemoryDirectory:
    return InMemoryDirectory(employees)


@pytest.fixture
def log_store() -> InMemoryLogStore:
    return InMemoryLogStore()


@pytest.fixture
def classifier() -> SpyClassifier:
    return SpyClassifier()


@pytest.fixture
def container(directory, log_store, classifier):
    return wire_container(directory=directory, log_store=log_store, classifier=classifier)


@pytest.fixture
def client(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.clockwise.clockwise.main import create_app

    app = create_app(container=container)
    with app.test_client() as c:
        yield c


@pytest.fixture
def make_classifier():
    return SpyClassifier
