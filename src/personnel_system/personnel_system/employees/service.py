from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence

from ..common.validators import require_choice, require_non_empty
from ..core.constants import DEFAULT_EMPLOYMENT_TYPE, DEFAULT_STATUS, UNRESOLVED_REFERENCE_NAME
from ..core.enums import EmployeeStatus, EmploymentType, Gender
from ..core.exceptions import NotFoundError
from ..dashboard.classifiers import birth_year
from ..org.repository import ReferenceRepository
from .filters import EmployeeListFilters, apply_filters
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

# (attribute, label hiển thị trong thông báo lỗi)
REQUIRED_FIELDS = (
    ("full_name", "Họ và tên"),
    ("date_of_birth", "Ngày tháng năm sinh"),
    ("phone_number", "Số điện thoại"),
    ("id_card_number", "Số CCCD"),
    ("id_card_issue_date", "Ngày cấp"),
    ("department_id", "Phòng ban công tác"),
    ("position_id", "Chức danh/Chức vụ"),
    ("recruitment_date", "Thời gian tuyển dụng"),
)


class EmployeeService:
    """Use case: manage employee records (create / update / soft delete / list)."""

    def __init__(self, employees: EmployeeRepository, references: ReferenceRepository):
        self._employees = employees
        self._references = references

    def _validated(self, employee: Employee) -> Employee:
        cleaned = {attr: require_non_empty(getattr(employee, attr), label) for attr, label in REQUIRED_FIELDS}
        return replace(
            employee,
            gender=require_choice(employee.gender, Gender, "Giới tính"),
            employment_type=require_choice(employee.employment_type, EmploymentType, "Hình thức tuyển dụng"),
            status=require_choice(employee.status or DEFAULT_STATUS, EmployeeStatus, "Trạng thái"),
            **cleaned,
        )

    def blank_form(self) -> Employee:
        departments = self._references.list_departments()
        positions = self._references.list_positions()
        return Employee(
            employee_id="",
            full_name="",
            date_of_birth="",
            gender=Gender.MALE,
            department_id=departments[0].dept_id if departments else "",
            position_id=positions[0].position_id if positions else "",
            phone_number="",
            employment_type=DEFAULT_EMPLOYMENT_TYPE,
            status=DEFAULT_STATUS,
        )

    def list_all(self) -> Sequence[Employee]:
        return self._employees.snapshot()

    def get(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Nhân viên không tồn tại")
        return employee

    def create(self, employee: Employee) -> Employee:
        validated = self._validated(employee)
        created = replace(validated, employee_id=self._employees.next_id())
        self._employees.add(created)
        logger.info("Thêm hồ sơ %s (%s)", created.employee_id, created.full_name)
        return created

    def update(self, employee_id: str, employee: Employee) -> Employee:
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Nhân viên không tồn tại")

        updated = replace(self._validated(employee), employee_id=employee_id)
        self._employees.replace(updated)
        logger.info("Cập nhật hồ sơ %s", employee_id)
        return updated

    def soft_delete(self, employee_id: str) -> Employee:
        """Chuyển trạng thái sang "Nghỉ việc"; hồ sơ vẫn được giữ lại."""
        employee = self.get(employee_id)
        inactive = replace(employee, status=EmployeeStatus.INACTIVE)
        self._employees.replace(inactive)
        logger.info("Chuyển hồ sơ %s sang trạng thái %s", employee_id, EmployeeStatus.INACTIVE.value)
        return inactive

    def search(self, filters: Optional[EmployeeListFilters] = None) -> list[Employee]:
        return apply_filters(self._employees.snapshot(), filters or EmployeeListFilters())

    def department_name(self, dept_id: str) -> str:
        d = self._references.get_department(dept_id)
        return d.dept_name if d else UNRESOLVED_REFERENCE_NAME

    def position_name(self, position_id: str) -> str:
        p = self._references.get_position(position_id)
        return p.position_name if p else UNRESOLVED_REFERENCE_NAME

    def list_rows(self, filters: Optional[EmployeeListFilters] = None) -> list[dict]:
        rows = []
        for e in self.search(filters):
            rows.append(
                {
                    "employee_id": e.employee_id,
                    "full_name": e.full_name,
                    "gender": getattr(e.gender, "value", e.gender),
                    "birth_year": birth_year(e),
                    "department_name": self.department_name(e.department_id),
                    "position_name": self.position_name(e.position_id),
                    "phone_number": e.phone_number,
                    "status": getattr(e.status, "value", e.status),
                }
            )
        return rows
