from __future__ import annotations

from enum import Enum


class Gender(str, Enum):
    """Giới tính (giá trị lưu đúng như nhập trên biểu mẫu)."""

    MALE = "Nam"
    FEMALE = "Nữ"


class EmploymentType(str, Enum):
    """Hình thức tuyển dụng."""

    PERMANENT = "Biên chế sự nghiệp"
    QUOTA_CONTRACT = "HĐ trong chỉ tiêu"
    SUPPORT_SERVICE = "Hỗ trợ phục vụ"
    PIECEWORK = "Khoán"


class EmployeeStatus(str, Enum):
    """Trạng thái công tác. Xoá hồ sơ = chuyển sang INACTIVE."""

    ACTIVE = "Đang công tác"
    INACTIVE = "Nghỉ việc"
    TRANSFERRED = "Chuyển công tác"
    RETIRED = "Nghỉ hưu"
    SUSPENDED = "Tạm hoãn HĐ"


class QualificationBucket(str, Enum):
    """Nhóm trình độ chuyên môn trên bảng điều khiển (thứ tự hiển thị)."""

    SPECIALIST_II = "CKII"
    SPECIALIST_I = "CKI"
    UNIVERSITY = "ĐH"
    COLLEGE = "CĐ"
    INTERMEDIATE = "TC"
    OTHER = "Khác"


class AgeBand(str, Enum):
    """Nhóm độ tuổi trên bảng điều khiển (thứ tự hiển thị)."""

    UNDER_30 = "< 30"
    FROM_30_TO_40 = "30-40"
    FROM_41_TO_50 = "41-50"
    FROM_51_TO_60 = "51-60"
    OVER_60 = "> 60"
