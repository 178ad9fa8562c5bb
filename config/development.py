import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "jinji_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also create demo employees on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

# Days of the prior month (counted back from its last day) still open for edits
SUBMISSION_BUFFER_DAYS = int(os.getenv("SUBMISSION_BUFFER_DAYS", "31"))

STANDARD_END_OF_DAY = os.getenv("STANDARD_END_OF_DAY", "18:00")
OVERTIME_HOURLY_RATE = int(os.getenv("OVERTIME_HOURLY_RATE", "2000"))

# "current_record": this month's stored payslip, then as previous_record
# "previous_record": latest earlier payslip, falling back to DEFAULT_BASIC_SALARY
# "default": always DEFAULT_BASIC_SALARY
BASIC_SALARY_SOURCE = os.getenv("BASIC_SALARY_SOURCE", "previous_record")
DEFAULT_BASIC_SALARY = int(os.getenv("DEFAULT_BASIC_SALARY", "250000"))

MANAGER_ID_RANGE = (20000, 30000)
