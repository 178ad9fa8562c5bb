"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

MANAGER_ID_RANGE = (20000, 30000)

DEFAULT_SUBMISSION_BUFFER_DAYS = 31
DEADLINE_CUTOFF = time.max

DEFAULT_STANDARD_END_OF_DAY = time(18, 0)
DEFAULT_OVERTIME_HOURLY_RATE = 2000

MIN_SCORE = 1
MAX_SCORE = 5
