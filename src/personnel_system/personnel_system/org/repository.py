from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Department, Position


class ReferenceRepository(Protocol):
    """Danh mục phòng ban / chức vụ (chỉ đọc, nạp một lần khi khởi động)."""

    def list_departments(self) -> Sequence[Department]:
        raise NotImplementedError

    def list_positions(self) -> Sequence[Position]:
        raise NotImplementedError

    def get_department(self, dept_id: str) -> Optional[Department]:
        raise NotImplementedError

    def get_position(self, position_id: str) -> Optional[Position]:
        raise NotImplementedError
