"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import EmployeeStatus, EmploymentType, Gender

# Tuổi nghỉ hưu theo giới tính
RETIREMENT_AGE_BY_GENDER = {
    Gender.MALE: 62,
    Gender.FEMALE: 60,
}
RETIREMENT_NOTICE_MONTHS = 6

DEFAULT_STATUS = EmployeeStatus.ACTIVE
DEFAULT_EMPLOYMENT_TYPE = EmploymentType.QUOTA_CONTRACT
PERMANENT_EMPLOYMENT_TYPE = EmploymentType.PERMANENT

EMPLOYEE_ID_PREFIX = "EMP"
UNRESOLVED_REFERENCE_NAME = "N/A"
