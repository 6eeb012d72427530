from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import optional_text, require_non_empty
from ..core.enums import EmployeeStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeDirectory

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage the employee directory (admin)."""

    def __init__(self, directory: EmployeeDirectory):
        self._directory = directory

    def list_employees(self) -> Sequence[Employee]:
        return self._directory.list_all()

    def list_selectable(self) -> Sequence[Employee]:
        """Employees that may be picked as the subject of a new clocking log."""
        return [e for e in self._directory.list_all() if e.is_active]

    def get(self, employee_id: str) -> Employee:
        employee = self._directory.find(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def add_employee(self, *, name: str, fingerprint_id: Optional[str] = None) -> Employee:
        name = require_non_empty(name, "Name")
        fingerprint_id = optional_text(fingerprint_id, "Fingerprint ID")

        status = EmployeeStatus.ACTIVE if fingerprint_id else EmployeeStatus.PENDING
        employee = self._directory.create(name=name, status=status, fingerprint_id=fingerprint_id)
        logger.info("Added employee %s (%s) as %s", employee.employee_id, employee.name, status.value)
        return employee

    def complete_enrollment(self, employee_id: str, *, fingerprint_id: str) -> Employee:
        fingerprint_id = require_non_empty(fingerprint_id, "Fingerprint ID")
        employee = self.get(employee_id)

        self._directory.set_fingerprint(employee_id, fingerprint_id=fingerprint_id)
        if employee.status == EmployeeStatus.PENDING:
            self._directory.set_status(employee_id, status=EmployeeStatus.ACTIVE)
        logger.info("Fingerprint %s enrolled for employee %s", fingerprint_id, employee_id)
        return self.get(employee_id)

    def activate(self, employee_id: str) -> Employee:
        return self._change_status(employee_id, EmployeeStatus.ACTIVE)

    def deactivate(self, employee_id: str) -> Employee:
        return self._change_status(employee_id, EmployeeStatus.INACTIVE)

    def toggle_status(self, employee_id: str) -> Employee:
        employee = self.get(employee_id)
        if employee.status == EmployeeStatus.ACTIVE:
            return self.deactivate(employee_id)
        return self.activate(employee_id)

    def delete_employee(self, employee_id: str) -> None:
        employee = self.get(employee_id)
        if not self._directory.delete(employee_id):
            raise ValidationError("Failed to delete employee")
        # Existing clocking logs keep their employee_name snapshot.
        logger.info("Deleted employee %s (%s)", employee.employee_id, employee.name)

    def _change_status(self, employee_id: str, status: EmployeeStatus) -> Employee:
        employee = self.get(employee_id)
        if employee.status == EmployeeStatus.PENDING:
            raise ValidationError("Employee must complete fingerprint enrollment first")
        if employee.status != status:
            self._directory.set_status(employee_id, status=status)
        return self.get(employee_id)
