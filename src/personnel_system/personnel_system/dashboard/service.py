from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from ..common.datetime_utils import today_local
from ..employees.repository import EmployeeRepository
from ..org.repository import ReferenceRepository
from .aggregator import Summary, aggregate


@dataclass(frozen=True)
class DashboardData:
    totals: dict
    departments: list[dict]
    qualifications: list[dict]
    ages: list[dict]
    near_retirement: list[dict]


class DashboardService:
    """Use case: dashboard statistics over the current record store."""

    def __init__(
        self,
        employees: EmployeeRepository,
        references: ReferenceRepository,
        *,
        clock: Optional[Callable[[], date]] = None,
    ):
        self._employees = employees
        self._references = references
        self._clock = clock or today_local

    def build_summary(self, *, evaluation_date: Optional[date] = None) -> Summary:
        return aggregate(
            self._employees.snapshot(),
            self._references.list_departments(),
            evaluation_date or self._clock(),
        )

    def build_dashboard(self, *, evaluation_date: Optional[date] = None) -> DashboardData:
        return self.to_view(self.build_summary(evaluation_date=evaluation_date))

    @staticmethod
    def to_view(summary: Summary) -> DashboardData:
        t = summary.totals
        return DashboardData(
            totals={
                "total": t.total,
                "active": t.active,
                "permanent": t.permanent,
                "contract": t.non_permanent,
            },
            departments=[{"id": d.dept_id, "name": d.dept_name, "value": d.count} for d in summary.departments],
            qualifications=[{"name": bucket.value, "count": n} for bucket, n in summary.qualifications],
            ages=[{"name": band.value, "count": n} for band, n in summary.ages],
            near_retirement=[{"employee_id": e.employee_id, "full_name": e.full_name} for e in summary.near_retirement],
        )
