from __future__ import annotations

import time
from typing import Callable, Iterable, Optional, Sequence

from ..core.constants import EMPLOYEE_ID_PREFIX
from .model import Employee


class InMemoryEmployeeRepository:
    """Process-local record store, kept in insertion order.

    Records are never removed; snapshot() hands out an immutable tuple so
    callers cannot mutate the canonical list.
    """

    def __init__(self, employees: Iterable[Employee] = (), *, clock_ms: Callable[[], int] | None = None):
        self._items: list[Employee] = list(employees)
        self._clock_ms = clock_ms or (lambda: int(time.time() * 1000))
        self._last_stamp = 0

    def snapshot(self) -> Sequence[Employee]:
        return tuple(self._items)

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        for e in self._items:
            if e.employee_id == employee_id:
                return e
        return None

    def next_id(self) -> str:
        stamp = max(int(self._clock_ms()), self._last_stamp + 1)
        while self.get_by_id(f"{EMPLOYEE_ID_PREFIX}{stamp}") is not None:
            stamp += 1
        self._last_stamp = stamp
        return f"{EMPLOYEE_ID_PREFIX}{stamp}"

    def add(self, employee: Employee) -> None:
        self._items.append(employee)

    def replace(self, employee: Employee) -> bool:
        for i, e in enumerate(self._items):
            if e.employee_id == employee.employee_id:
                self._items[i] = employee
                return True
        return False
