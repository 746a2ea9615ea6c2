"""Danh mục mặc định của Trung tâm Y tế."""

from __future__ import annotations

from .model import Department, Position

DEPARTMENTS: tuple[Department, ...] = (
    Department("PB01", "Ban Giám đốc"),
    Department("PB02", "Phòng Tổ chức - Hành chính"),
    Department("PB03", "Phòng Kế hoạch - Nghiệp vụ"),
    Department("PB04", "Phòng Tài chính - Kế toán"),
    Department("PB05", "Khoa Khám bệnh"),
    Department("PB06", "Khoa Nội tổng hợp"),
    Department("PB07", "Khoa Ngoại - Sản"),
    Department("PB08", "Khoa Hồi sức cấp cứu"),
    Department("PB09", "Khoa Dược - Vật tư"),
    Department("PB10", "Khoa Kiểm soát bệnh tật"),
)

POSITIONS: tuple[Position, ...] = (
    Position("CV01", "Giám đốc"),
    Position("CV02", "Phó Giám đốc"),
    Position("CV03", "Trưởng phòng/khoa"),
    Position("CV04", "Phó Trưởng phòng/khoa"),
    Position("CV05", "Bác sĩ"),
    Position("CV06", "Dược sĩ"),
    Position("CV07", "Điều dưỡng"),
    Position("CV08", "Kỹ thuật viên"),
    Position("CV09", "Nhân viên"),
)
