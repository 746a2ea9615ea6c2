"""Ví dụ: dùng service layer (không qua Flask).

In ra số liệu bảng điều khiển và danh sách nhân sự lọc theo tên từ dữ liệu mẫu.
"""

from src.personnel_system.personnel_system.container import build_container
from src.personnel_system.personnel_system.employees.filters import EmployeeListFilters


def main():
    container = build_container(seed_demo_data=True)
    print(container.dashboard_service.build_dashboard())
    print(container.employee_service.list_rows(EmployeeListFilters(search_term="an")))


if __name__ == "__main__":
    main()
