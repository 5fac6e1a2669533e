"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import CommentPolicy, PercentageBasis

CLASS_ORDER = (
    "Nursery",
    "Lkg",
    "Lkg - A",
    "Lkg - B",
    "Ukg",
    "First",
    "Second",
    "Third",
    "Fourth",
)

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

MIN_REPORT_YEAR = 2000
MAX_REPORT_YEAR = 2100
REPORT_YEARS_BACK = 2
PERCENTAGE_DECIMALS = 1

DEFAULT_COMMENT_POLICY = CommentPolicy.PRESENT_ONLY
DEFAULT_PERCENTAGE_BASIS = PercentageBasis.STUDENT_RECORDED_DAYS
