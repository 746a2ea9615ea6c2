from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import Any, Iterable, Mapping, Optional

from ..core.enums import EmployeeStatus, EmploymentType, Gender
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class StateManagementTraining:
    senior_specialist: bool = False
    specialist: bool = False


@dataclass(frozen=True)
class PoliticalTheoryTraining:
    advanced: bool = False
    intermediate: bool = False
    primary: bool = False


@dataclass(frozen=True)
class ForeignLanguage:
    english: Optional[str] = None  # B, B1, C...
    chinese: Optional[str] = None
    german: Optional[str] = None
    college_or_higher: bool = False
    certificate: bool = False


@dataclass(frozen=True)
class InformaticsTraining:
    university_or_college: bool = False
    certificate: bool = False


@dataclass(frozen=True)
class OtherCertificates:
    hospital_management: bool = False
    nursing_management: bool = False
    national_defense: Optional[str] = None  # DT3, DT4...


@dataclass(frozen=True)
class WorkHistoryEvent:
    date: str
    event: str


@dataclass(frozen=True)
class DecisionDocument:
    name: str
    file_url: str


@dataclass(frozen=True)
class Employee:
    """Thực thể miền (domain): Hồ sơ nhân sự.

    Các trường ngày tháng giữ nguyên chuỗi YYYY-MM-DD như khi nhập; việc
    diễn giải (tính tuổi, năm sinh) do tầng thống kê đảm nhiệm.
    """

    employee_id: str
    full_name: str
    date_of_birth: str
    gender: Gender
    department_id: str
    position_id: str
    phone_number: str
    employment_type: EmploymentType
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    is_party_member: bool = False
    email: Optional[str] = None
    ethnicity: Optional[str] = None
    religion: Optional[str] = None

    # Giấy tờ & địa chỉ
    id_card_number: str = ""
    id_card_issue_date: str = ""
    id_card_issue_place: Optional[str] = None
    place_of_birth: Optional[str] = None
    hometown: Optional[str] = None
    permanent_address: Optional[str] = None
    current_address: Optional[str] = None

    # Công tác & ngạch
    recruitment_date: str = ""
    rank_code: Optional[str] = None
    rank_appointment_date: Optional[str] = None

    # Trình độ & bằng cấp
    qualification_by_rank: Optional[str] = None
    current_specialization: Optional[str] = None
    highest_specialization: Optional[str] = None
    state_management: StateManagementTraining = field(default_factory=StateManagementTraining)
    political_theory: PoliticalTheoryTraining = field(default_factory=PoliticalTheoryTraining)
    foreign_language: ForeignLanguage = field(default_factory=ForeignLanguage)
    informatics: InformaticsTraining = field(default_factory=InformaticsTraining)
    other_certificates: OtherCertificates = field(default_factory=OtherCertificates)

    work_history: tuple[WorkHistoryEvent, ...] = ()
    decisions: tuple[DecisionDocument, ...] = ()


_NESTED_GROUPS = {
    "state_management": StateManagementTraining,
    "political_theory": PoliticalTheoryTraining,
    "foreign_language": ForeignLanguage,
    "informatics": InformaticsTraining,
    "other_certificates": OtherCertificates,
}


def _build_group(cls, raw: Any, field_name: str):
    if isinstance(raw, cls):
        return raw
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ValidationError(f"Dữ liệu {field_name} không hợp lệ")
    known = {f.name for f in fields(cls)}
    return cls(**{k: v for k, v in raw.items() if k in known})


def _build_items(cls, raw: Any, field_name: str) -> tuple:
    if raw is None:
        return ()
    if isinstance(raw, (str, bytes, Mapping)) or not isinstance(raw, Iterable):
        raise ValidationError(f"Dữ liệu {field_name} không hợp lệ")

    known = [f.name for f in fields(cls)]
    items = []
    for item in raw:
        if isinstance(item, cls):
            items.append(item)
        elif isinstance(item, Mapping):
            items.append(cls(**{k: str(item.get(k) or "") for k in known}))
        else:
            raise ValidationError(f"Dữ liệu {field_name} không hợp lệ")
    return tuple(items)


def employee_to_dict(employee: Employee) -> dict:
    data = asdict(employee)
    for key, value in data.items():
        if isinstance(value, Enum):
            data[key] = value.value
    data["work_history"] = list(data["work_history"])
    data["decisions"] = list(data["decisions"])
    return data


def employee_from_dict(raw: dict) -> Employee:
    """Build an Employee from a plain mapping (form/JSON payload).

    Enum fields are passed through as-is; the service layer validates them.
    Unknown keys are ignored. Nested groups must be mappings and
    work_history/decisions lists of mappings, else ValidationError.
    """
    if not isinstance(raw, Mapping):
        raise ValidationError("Dữ liệu hồ sơ không hợp lệ")

    known = {f.name for f in fields(Employee)}
    data = {k: v for k, v in raw.items() if k in known}

    for name, cls in _NESTED_GROUPS.items():
        if name in data:
            data[name] = _build_group(cls, data[name], name)

    data["work_history"] = _build_items(WorkHistoryEvent, data.get("work_history"), "work_history")
    data["decisions"] = _build_items(DecisionDocument, data.get("decisions"), "decisions")

    data.setdefault("employee_id", "")
    for required in ("full_name", "date_of_birth", "department_id", "position_id", "phone_number"):
        data.setdefault(required, "")
    data.setdefault("gender", Gender.MALE)
    data.setdefault("employment_type", EmploymentType.QUOTA_CONTRACT)
    if data.get("status") in (None, ""):
        data["status"] = EmployeeStatus.ACTIVE
    return Employee(**data)
