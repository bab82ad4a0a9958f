"""Constants and defaults.

Note: Keep payroll rule constants here to avoid magic numbers spread across code.
"""

from datetime import time

STANDARD_WORKING_DAYS_PER_MONTH = 22
STANDARD_WORKING_HOURS_PER_DAY = 8
OVERTIME_RATE_MULTIPLIER = 1.25

STANDARD_LOGIN_TIME = time(8, 0)
LATE_THRESHOLD_TIME = time(8, 15)
STANDARD_LOGOUT_TIME = time(17, 0)

UNPAID_LEAVE_TYPE = "Unpaid"

DEFAULT_ROSTER_MAX_WORKERS = 4
