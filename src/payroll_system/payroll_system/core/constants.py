"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_COUNTRY = "IN"
DEFAULT_STATE = "DL"

STANDARD_WORKING_HOURS = 8
MAX_WORKING_DAYS = 26
HOURS_TO_DAYS_DIVISOR = 24

DEFAULT_BASE_SALARY = 8000
DEFAULT_DAILY_WAGE = 258
PROPORTIONAL_THRESHOLD = 8000

# Parsed-cell status thresholds (hours)
FULL_DAY_HOURS = 6
HALF_DAY_HOURS = 4

# Used when the working-days calendar cannot be computed
FALLBACK_TOTAL_DAYS = 30
FALLBACK_WORKING_DAYS = 22
FALLBACK_WEEKENDS = 8
FALLBACK_SUNDAYS = 4
FALLBACK_SATURDAYS = 4

# Used when the salary calculation itself fails
FALLBACK_REQUIRED_DAYS = 27

DEFAULT_UPCOMING_DAYS = 30
