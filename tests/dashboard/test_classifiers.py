from datetime import date

import pytest

from src.personnel_system.personnel_system.core.enums import AgeBand, Gender, QualificationBucket
from src.personnel_system.personnel_system.dashboard.classifiers import (
    age_in_years,
    birth_year,
    classify_age,
    classify_qualification,
    is_near_retirement,
    retirement_age,
)


@pytest.mark.parametrize(
    "text, bucket",
    [
        ("Thạc sĩ CKII Nội khoa", QualificationBucket.SPECIALIST_II),
        ("CKII - CKI", QualificationBucket.SPECIALIST_II),
        ("BS CKI Ngoại", QualificationBucket.SPECIALIST_I),
        ("CKI, ĐH Y", QualificationBucket.SPECIALIST_I),
        ("Cử nhân Y tế công cộng", QualificationBucket.UNIVERSITY),
        ("CĐ Hộ sinh", QualificationBucket.COLLEGE),
        ("TC Dược", QualificationBucket.INTERMEDIATE),
        ("Sơ cấp", QualificationBucket.OTHER),
        ("", QualificationBucket.OTHER),
        (None, QualificationBucket.OTHER),
    ],
)
def test_classify_qualification(text, bucket):
    assert classify_qualification(text) == bucket


def test_classify_age_bands():
    assert classify_age(0) == AgeBand.UNDER_30
    assert classify_age(29) == AgeBand.UNDER_30
    assert classify_age(30) == AgeBand.FROM_30_TO_40
    assert classify_age(41) == AgeBand.FROM_41_TO_50
    assert classify_age(60) == AgeBand.FROM_51_TO_60
    assert classify_age(61) == AgeBand.OVER_60


def test_age_ignores_month_and_day(make_employee):
    e = make_employee(date_of_birth="1990-12-31")

    assert age_in_years(e, date(2024, 1, 1)) == 34
    assert birth_year(e) == 1990


def test_age_of_malformed_date_is_zero(make_employee):
    e = make_employee(date_of_birth="31/12/1990")

    assert birth_year(e) is None
    assert age_in_years(e, date(2024, 1, 1)) == 0
    assert not is_near_retirement(e, date(2024, 1, 1))


def test_retirement_age_by_gender():
    assert retirement_age(Gender.MALE) == 62
    assert retirement_age(Gender.FEMALE) == 60
    assert retirement_age("Nữ") == 60
