from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Sequence

from ..core.constants import PERMANENT_EMPLOYMENT_TYPE
from ..core.enums import AgeBand, EmployeeStatus, QualificationBucket
from ..employees.model import Employee
from ..org.model import Department
from .classifiers import age_in_years, classify_age, classify_qualification, is_near_retirement


@dataclass(frozen=True)
class Totals:
    total: int
    active: int
    permanent: int
    non_permanent: int


@dataclass(frozen=True)
class DepartmentCount:
    dept_id: str
    dept_name: str
    count: int


@dataclass(frozen=True)
class Summary:
    """Read-model cho bảng điều khiển."""

    totals: Totals
    departments: tuple[DepartmentCount, ...]
    qualifications: tuple[tuple[QualificationBucket, int], ...]
    ages: tuple[tuple[AgeBand, int], ...]
    near_retirement: tuple[Employee, ...]


def compute_totals(employees: Sequence[Employee]) -> Totals:
    total = len(employees)
    active = sum(1 for e in employees if e.status == EmployeeStatus.ACTIVE)
    permanent = sum(1 for e in employees if e.employment_type == PERMANENT_EMPLOYMENT_TYPE)
    return Totals(total=total, active=active, permanent=permanent, non_permanent=total - permanent)


def department_histogram(employees: Sequence[Employee], departments: Iterable[Department]) -> tuple[DepartmentCount, ...]:
    counts: dict[str, int] = {}
    for e in employees:
        counts[e.department_id] = counts.get(e.department_id, 0) + 1

    out = []
    for d in departments:
        n = counts.get(d.dept_id, 0)
        if n > 0:
            out.append(DepartmentCount(dept_id=d.dept_id, dept_name=d.dept_name, count=n))
    return tuple(out)


def qualification_histogram(employees: Sequence[Employee]) -> tuple[tuple[QualificationBucket, int], ...]:
    counts = {bucket: 0 for bucket in QualificationBucket}
    for e in employees:
        counts[classify_qualification(e.highest_specialization)] += 1
    return tuple(counts.items())


def age_histogram(employees: Sequence[Employee], evaluation_date: date) -> tuple[tuple[AgeBand, int], ...]:
    counts = {band: 0 for band in AgeBand}
    for e in employees:
        counts[classify_age(age_in_years(e, evaluation_date))] += 1
    return tuple(counts.items())


def near_retirement(employees: Sequence[Employee], evaluation_date: date) -> tuple[Employee, ...]:
    return tuple(e for e in employees if is_near_retirement(e, evaluation_date))


def aggregate(employees: Iterable[Employee], departments: Iterable[Department], evaluation_date: date) -> Summary:
    """Dashboard statistics over one snapshot of records.

    Pure function: never mutates its inputs and never raises for an empty
    collection or empty optional fields.
    """
    snapshot = tuple(employees)
    return Summary(
        totals=compute_totals(snapshot),
        departments=department_histogram(snapshot, departments),
        qualifications=qualification_histogram(snapshot),
        ages=age_histogram(snapshot, evaluation_date),
        near_retirement=near_retirement(snapshot, evaluation_date),
    )
