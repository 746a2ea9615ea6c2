from src.personnel_system.personnel_system.employees.filters import (
    EmployeeListFilters,
    apply_filters,
    filter_employees,
    normalize_list_filters,
)


def test_search_is_case_insensitive_substring(make_employee):
    an = make_employee(full_name="Nguyễn Văn An")
    binh = make_employee(full_name="Trần Thị Bình")

    assert filter_employees([an, binh], "an") == [an]
    assert filter_employees([an, binh], "BÌNH") == [binh]


def test_empty_filters_return_input_unchanged(make_employee):
    employees = [make_employee(), make_employee(), make_employee()]

    result = filter_employees(employees, "", None, None)

    assert result == employees
    assert filter_employees(employees) == employees


def test_department_and_position_combine_with_and(make_employee):
    a = make_employee(full_name="Lê Văn Nam", department_id="PB05", position_id="CV05")
    b = make_employee(full_name="Lê Thị Hoa", department_id="PB05", position_id="CV07")
    c = make_employee(full_name="Lê Văn Hải", department_id="PB06", position_id="CV05")

    assert filter_employees([a, b, c], "", "PB05", None) == [a, b]
    assert filter_employees([a, b, c], "", None, "CV05") == [a, c]
    assert filter_employees([a, b, c], "lê", "PB05", "CV05") == [a]
    assert filter_employees([a, b, c], "hoa", "PB06", None) == []


def test_filter_is_idempotent_and_preserves_order(make_employee):
    employees = [
        make_employee(full_name="Đỗ Minh Anh", department_id="PB02"),
        make_employee(full_name="Vũ Thị Lan", department_id="PB02"),
        make_employee(full_name="Ngô Anh Tuấn", department_id="PB03"),
        make_employee(full_name="Bùi Thanh An", department_id="PB02"),
    ]

    once = filter_employees(employees, "an", "PB02", None)
    twice = filter_employees(once, "an", "PB02", None)

    assert [e.full_name for e in once] == ["Đỗ Minh Anh", "Vũ Thị Lan", "Bùi Thanh An"]
    assert twice == once


def test_normalize_list_filters_from_query_args(make_employee):
    filters = normalize_list_filters({"q": "an", "department": " ", "position": "CV05"})

    assert filters == EmployeeListFilters(search_term="an", department_id=None, position_id="CV05")

    e = make_employee(full_name="Nguyễn Văn An", position_id="CV05")
    assert apply_filters([e], filters) == [e]
    assert normalize_list_filters({}) == EmployeeListFilters()


def test_whitespace_in_search_term_is_significant(make_employee):
    lan = make_employee(full_name="Lan")
    an = make_employee(full_name="Nguyễn Văn An")

    assert filter_employees([lan, an], " ") == [an]
    assert filter_employees([lan, an], " an") == [an]
    assert normalize_list_filters({"q": " an"}).search_term == " an"
