from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from .model import Employee


@dataclass(frozen=True)
class EmployeeListFilters:
    search_term: str = ""
    department_id: Optional[str] = None
    position_id: Optional[str] = None


def _clean_optional(value: object) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def normalize_list_filters(raw: Mapping[str, object]) -> EmployeeListFilters:
    """Map list-view query arguments (q, department, position) to filters."""
    return EmployeeListFilters(
        search_term=str(raw.get("q") or ""),
        department_id=_clean_optional(raw.get("department")),
        position_id=_clean_optional(raw.get("position")),
    )


def matches(
    employee: Employee,
    search_term: str = "",
    department_id: Optional[str] = None,
    position_id: Optional[str] = None,
) -> bool:
    term = (search_term or "").casefold()
    if term and term not in (employee.full_name or "").casefold():
        return False
    if department_id and employee.department_id != department_id:
        return False
    if position_id and employee.position_id != position_id:
        return False
    return True


def filter_employees(
    employees: Iterable[Employee],
    search_term: str = "",
    department_id: Optional[str] = None,
    position_id: Optional[str] = None,
) -> list[Employee]:
    """Visible subset for the list view, in input order.

    Name match is a case-insensitive substring test; department and position
    are exact matches and are ignored when empty.
    """
    return [e for e in employees if matches(e, search_term, department_id, position_id)]


def apply_filters(employees: Iterable[Employee], filters: EmployeeListFilters) -> list[Employee]:
    return filter_employees(employees, filters.search_term, filters.department_id, filters.position_id)
