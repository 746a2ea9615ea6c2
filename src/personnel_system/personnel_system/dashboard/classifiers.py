"""Classification rules for the dashboard histograms.

Each rule table is evaluated top to bottom and the first matching rule wins,
so the tables are ordered from the most specific bucket to the least.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from ..common.datetime_utils import months_between, try_parse_date
from ..core.constants import RETIREMENT_AGE_BY_GENDER, RETIREMENT_NOTICE_MONTHS
from ..core.enums import AgeBand, Gender, QualificationBucket
from ..employees.model import Employee

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QualificationRule:
    bucket: QualificationBucket
    predicate: Callable[[str], bool]


def _contains_any(*needles: str) -> Callable[[str], bool]:
    return lambda text: any(n in text for n in needles)


# "CKII" must be tested before "CKI" (substring), and both before the degree levels.
QUALIFICATION_RULES: tuple[QualificationRule, ...] = (
    QualificationRule(QualificationBucket.SPECIALIST_II, _contains_any("CKII")),
    QualificationRule(QualificationBucket.SPECIALIST_I, _contains_any("CKI")),
    QualificationRule(QualificationBucket.UNIVERSITY, _contains_any("ĐH", "Cử nhân")),
    QualificationRule(QualificationBucket.COLLEGE, _contains_any("CĐ")),
    QualificationRule(QualificationBucket.INTERMEDIATE, _contains_any("TC")),
)


def classify_qualification(highest_specialization: Optional[str]) -> QualificationBucket:
    text = highest_specialization or ""
    for rule in QUALIFICATION_RULES:
        if rule.predicate(text):
            return rule.bucket
    return QualificationBucket.OTHER


@dataclass(frozen=True)
class AgeRule:
    band: AgeBand
    upper_inclusive: Optional[int]


AGE_RULES: tuple[AgeRule, ...] = (
    AgeRule(AgeBand.UNDER_30, 29),
    AgeRule(AgeBand.FROM_30_TO_40, 40),
    AgeRule(AgeBand.FROM_41_TO_50, 50),
    AgeRule(AgeBand.FROM_51_TO_60, 60),
    AgeRule(AgeBand.OVER_60, None),
)


def classify_age(age: int) -> AgeBand:
    for rule in AGE_RULES:
        if rule.upper_inclusive is None or age <= rule.upper_inclusive:
            return rule.band


def birth_year(employee: Employee) -> Optional[int]:
    born = try_parse_date(employee.date_of_birth)
    return born.year if born else None


def age_in_years(employee: Employee, evaluation_date: date) -> int:
    """Calendar-year age (evaluation year minus birth year).

    An empty or malformed date of birth counts as age 0.
    """
    year = birth_year(employee)
    if year is None:
        logger.warning("Ngày sinh không hợp lệ (%s): %r", employee.employee_id, employee.date_of_birth)
        return 0
    return evaluation_date.year - year


def retirement_age(gender: Gender) -> int:
    return RETIREMENT_AGE_BY_GENDER[Gender(gender)]


def is_near_retirement(employee: Employee, evaluation_date: date) -> bool:
    """True when statutory retirement age is reached within the notice window.

    Age is measured in whole months so that the half-year window
    [retirement_age - 0.5, retirement_age) is meaningful.
    """
    born = try_parse_date(employee.date_of_birth)
    if born is None:
        return False
    try:
        limit_months = retirement_age(employee.gender) * 12
    except (KeyError, ValueError):
        return False
    age_months = months_between(born, evaluation_date)
    return limit_months - RETIREMENT_NOTICE_MONTHS <= age_months < limit_months
