import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "jinji_db"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

SUBMISSION_BUFFER_DAYS = int(os.getenv("SUBMISSION_BUFFER_DAYS", "31"))

STANDARD_END_OF_DAY = os.getenv("STANDARD_END_OF_DAY", "18:00")
OVERTIME_HOURLY_RATE = int(os.getenv("OVERTIME_HOURLY_RATE", "2000"))

BASIC_SALARY_SOURCE = os.getenv("BASIC_SALARY_SOURCE", "current_record")
# Empty means no fallback: an employee's first payslip is run with an explicit
# basic_salary (POST /payroll/run or scripts/run_payroll.py --basic-salary)
_default_basic_salary = os.getenv("DEFAULT_BASIC_SALARY", "")
DEFAULT_BASIC_SALARY = int(_default_basic_salary) if _default_basic_salary else None

MANAGER_ID_RANGE = (20000, 30000)
