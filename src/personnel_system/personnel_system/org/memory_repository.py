from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .model import Department, Position


class InMemoryReferenceRepository:
    """Reference lists held in declared order; never mutated after construction."""

    def __init__(self, departments: Iterable[Department], positions: Iterable[Position]):
        self._departments = tuple(departments)
        self._positions = tuple(positions)
        self._departments_by_id = {d.dept_id: d for d in self._departments}
        self._positions_by_id = {p.position_id: p for p in self._positions}

    def list_departments(self) -> Sequence[Department]:
        return self._departments

    def list_positions(self) -> Sequence[Position]:
        return self._positions

    def get_department(self, dept_id: str) -> Optional[Department]:
        return self._departments_by_id.get(dept_id)

    def get_position(self, position_id: str) -> Optional[Position]:
        return self._positions_by_id.get(position_id)
