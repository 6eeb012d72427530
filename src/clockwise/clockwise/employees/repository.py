from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import EmployeeStatus
from .model import Employee


class EmployeeDirectory(Protocol):
    """Giao diện repository cho danh bạ nhân viên.

    Lưu ý (DIP): tầng service phụ thuộc vào interface này, không phụ thuộc trực tiếp DB cụ thể.
    """

    def find(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def create(self, *, name: str, status: EmployeeStatus, fingerprint_id: Optional[str] = None) -> Employee:
        raise NotImplementedError

    def set_status(self, employee_id: str, *, status: EmployeeStatus) -> bool:
        raise NotImplementedError

    def set_fingerprint(self, employee_id: str, *, fingerprint_id: str) -> bool:
        raise NotImplementedError

    def delete(self, employee_id: str) -> bool:
        raise NotImplementedError
