"""Hồ sơ mẫu nạp khi khởi động (SEED_DEMO_DATA=1)."""

from __future__ import annotations

from ..core.enums import EmployeeStatus, EmploymentType, Gender
from .model import (
    Employee,
    ForeignLanguage,
    InformaticsTraining,
    PoliticalTheoryTraining,
    StateManagementTraining,
    WorkHistoryEvent,
)

DEMO_EMPLOYEES: tuple[Employee, ...] = (
    Employee(
        employee_id="EMP001",
        full_name="Nguyễn Văn An",
        date_of_birth="1968-05-12",
        gender=Gender.MALE,
        department_id="PB01",
        position_id="CV01",
        phone_number="0912345678",
        employment_type=EmploymentType.PERMANENT,
        is_party_member=True,
        ethnicity="Kinh",
        id_card_number="040068000123",
        id_card_issue_date="2021-04-10",
        recruitment_date="1994-09-01",
        rank_code="V.08.01.01",
        highest_specialization="BS CKII Nội khoa",
        state_management=StateManagementTraining(senior_specialist=True),
        political_theory=PoliticalTheoryTraining(advanced=True),
        informatics=InformaticsTraining(certificate=True),
        work_history=(WorkHistoryEvent(date="2015-07-01", event="Bổ nhiệm Giám đốc"),),
    ),
    Employee(
        employee_id="EMP002",
        full_name="Trần Thị Bình",
        date_of_birth="1979-11-03",
        gender=Gender.FEMALE,
        department_id="PB06",
        position_id="CV05",
        phone_number="0987654321",
        employment_type=EmploymentType.PERMANENT,
        id_card_number="040179000456",
        id_card_issue_date="2021-06-22",
        recruitment_date="2004-03-15",
        highest_specialization="BS CKI Nhi khoa",
        foreign_language=ForeignLanguage(english="B1", certificate=True),
    ),
    Employee(
        employee_id="EMP003",
        full_name="Lê Hoàng Cường",
        date_of_birth="1996-02-20",
        gender=Gender.MALE,
        department_id="PB08",
        position_id="CV07",
        phone_number="0905111222",
        employment_type=EmploymentType.QUOTA_CONTRACT,
        id_card_number="040096000789",
        id_card_issue_date="2022-01-05",
        recruitment_date="2019-08-01",
        highest_specialization="CĐ Điều dưỡng",
    ),
    Employee(
        employee_id="EMP004",
        full_name="Phạm Thị Dung",
        date_of_birth="1985-08-30",
        gender=Gender.FEMALE,
        department_id="PB09",
        position_id="CV06",
        phone_number="0933444555",
        employment_type=EmploymentType.PERMANENT,
        id_card_number="040185000321",
        id_card_issue_date="2021-09-18",
        recruitment_date="2009-10-01",
        highest_specialization="Dược sĩ ĐH",
    ),
    Employee(
        employee_id="EMP005",
        full_name="Hoàng Văn Em",
        date_of_birth="1990-12-01",
        gender=Gender.MALE,
        department_id="PB02",
        position_id="CV09",
        phone_number="0977888999",
        employment_type=EmploymentType.SUPPORT_SERVICE,
        id_card_number="040090000654",
        id_card_issue_date="2023-02-14",
        recruitment_date="2016-05-16",
        highest_specialization="TC Kế toán",
        status=EmployeeStatus.SUSPENDED,
    ),
)
