from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from .dashboard.service import DashboardService
from .employees.memory_repository import InMemoryEmployeeRepository
from .employees.seed_data import DEMO_EMPLOYEES
from .employees.service import EmployeeService
from .org.memory_repository import InMemoryReferenceRepository
from .org.seed_data import DEPARTMENTS, POSITIONS


@dataclass(frozen=True)
class Container:
    employees_repo: InMemoryEmployeeRepository
    references_repo: InMemoryReferenceRepository

    employee_service: EmployeeService
    dashboard_service: DashboardService


def build_container(*, seed_demo_data: bool = True, clock: Optional[Callable[[], date]] = None) -> Container:
    references_repo = InMemoryReferenceRepository(DEPARTMENTS, POSITIONS)
    employees_repo = InMemoryEmployeeRepository(DEMO_EMPLOYEES if seed_demo_data else ())

    employee_service = EmployeeService(employees_repo, references_repo)
    dashboard_service = DashboardService(employees_repo, references_repo, clock=clock)

    return Container(
        employees_repo=employees_repo,
        references_repo=references_repo,
        employee_service=employee_service,
        dashboard_service=dashboard_service,
    )
