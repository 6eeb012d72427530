"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

MIN_SHIFT_HOURS = 6.0
MAX_SHIFT_HOURS = 9.0
LATEST_CLOCK_IN = time(9, 30)
EARLIEST_CLOCK_OUT = time(17, 0)

DEFAULT_LOCAL_TIMEZONE = "UTC"
DEFAULT_CLASSIFIER_TIMEOUT_SECONDS = 30.0
DEFAULT_RECENT_LOGS_LIMIT = 5
ANOMALY_WINDOW_HOURS = 24

LOG_ID_PREFIX = "log_"
EMPLOYEE_ID_PREFIX = "emp_"
