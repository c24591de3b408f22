import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "payroll_test_db"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

HOLIDAY_COUNTRY = "IN"
HOLIDAY_STATE = "DL"

DEFAULT_BASE_SALARY = 8000
DEFAULT_DAILY_WAGE = 258
MAX_WORKING_DAYS = 26
STANDARD_WORKING_HOURS = 8

EMPLOYEE_SALARY_OVERRIDES = {}
