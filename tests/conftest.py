from __future__ import annotations

from datetime import date

import pytest

from src.personnel_system.personnel_system.core.enums import EmployeeStatus, EmploymentType, Gender
from src.personnel_system.personnel_system.employees.model import Employee


@pytest.fixture
def evaluation_date() -> date:
    return date(2024, 6, 15)


@pytest.fixture
def make_employee():
    counter = {"n": 0}

    def _make(**overrides) -> Employee:
        counter["n"] += 1
        data = dict(
            employee_id=f"T{counter['n']:03d}",
            full_name=f"Nhân viên {counter['n']}",
            date_of_birth="1990-01-01",
            gender=Gender.MALE,
            department_id="PB01",
            position_id="CV01",
            phone_number="0900000000",
            employment_type=EmploymentType.QUOTA_CONTRACT,
            status=EmployeeStatus.ACTIVE,
            id_card_number="040090000001",
            id_card_issue_date="2021-01-01",
            recruitment_date="2015-01-01",
        )
        data.update(overrides)
        return Employee(**data)

    return _make
