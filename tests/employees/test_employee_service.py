from __future__ import annotations

import pytest

from src.clockwise.clockwise.core.enums import EmployeeStatus
from src.clockwise.clockwise.core.exceptions import NotFoundError, ValidationError
from src.clockwise.clockwise.employees.service import EmployeeService


def test_add_employee_without_fingerprint_is_pending(directory):
    emp = EmployeeService(directory).add_employee(name="  Eve Adams ")

    assert emp.name == "Eve Adams"
    assert emp.status == EmployeeStatus.PENDING
    assert emp.fingerprint_id is None


def test_add_employee_with_fingerprint_is_active(directory):
    emp = EmployeeService(directory).add_employee(name="Eve Adams", fingerprint_id="fp_9")

    assert emp.status == EmployeeStatus.ACTIVE


def test_add_employee_requires_name(directory):
    with pytest.raises(ValidationError):
        EmployeeService(directory).add_employee(name="   ")


def test_enrollment_activates_pending_employee(directory):
    emp = EmployeeService(directory).complete_enrollment("2", fingerprint_id="fp_2")

    assert emp.status == EmployeeStatus.ACTIVE
    assert emp.fingerprint_id == "fp_2"


def test_enrollment_keeps_inactive_employee_inactive(directory):
    emp = EmployeeService(directory).complete_enrollment("4", fingerprint_id="fp_new")

    assert emp.status == EmployeeStatus.INACTIVE
    assert emp.fingerprint_id == "fp_new"


def test_toggle_status_round_trip(directory):
    svc = EmployeeService(directory)

    assert svc.toggle_status("1").status == EmployeeStatus.INACTIVE
    assert svc.toggle_status("1").status == EmployeeStatus.ACTIVE


def test_pending_employee_cannot_be_toggled(directory):
    with pytest.raises(ValidationError):
        EmployeeService(directory).toggle_status("2")


def test_selectable_lists_active_only(directory):
    names = [e.name for e in EmployeeService(directory).list_selectable()]

    assert names == ["Alice Johnson", "Charlie Brown"]


def test_delete_employee(directory):
    svc = EmployeeService(directory)
    svc.delete_employee("4")

    assert directory.find("4") is None
    with pytest.raises(NotFoundError):
        svc.delete_employee("4")


def test_unknown_employee_operations_raise_not_found(directory):
    svc = EmployeeService(directory)

    with pytest.raises(NotFoundError):
        svc.activate("nope")
    with pytest.raises(NotFoundError):
        svc.complete_enrollment("nope", fingerprint_id="fp")


def test_add_employee_blank_fingerprint_is_pending(directory):
    emp = EmployeeService(directory).add_employee(name="Eve Adams", fingerprint_id="   ")

    assert emp.status == EmployeeStatus.PENDING
    assert emp.fingerprint_id is None


def test_add_employee_rejects_non_string_fingerprint(directory):
    with pytest.raises(ValidationError):
        EmployeeService(directory).add_employee(name="Eve Adams", fingerprint_id=12345)
