import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "jinji_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

SUBMISSION_BUFFER_DAYS = 31
STANDARD_END_OF_DAY = "18:00"
OVERTIME_HOURLY_RATE = 2000
BASIC_SALARY_SOURCE = "previous_record"
DEFAULT_BASIC_SALARY = 250000

MANAGER_ID_RANGE = (20000, 30000)
