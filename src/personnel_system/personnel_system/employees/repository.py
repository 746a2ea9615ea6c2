from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Giao diện repository cho hồ sơ nhân sự.

    Lưu ý (DIP): tầng service phụ thuộc vào interface này, không phụ thuộc trực tiếp nơi lưu trữ cụ thể.
    """

    def snapshot(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def next_id(self) -> str:
        raise NotImplementedError

    def add(self, employee: Employee) -> None:
        raise NotImplementedError

    def replace(self, employee: Employee) -> bool:
        raise NotImplementedError
