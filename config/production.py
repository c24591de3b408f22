import json
import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "payroll_db"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

HOLIDAY_COUNTRY = os.getenv("HOLIDAY_COUNTRY", "IN")
HOLIDAY_STATE = os.getenv("HOLIDAY_STATE", "DL")

DEFAULT_BASE_SALARY = float(os.getenv("DEFAULT_BASE_SALARY", "8000"))
DEFAULT_DAILY_WAGE = float(os.getenv("DEFAULT_DAILY_WAGE", "258"))
MAX_WORKING_DAYS = int(os.getenv("MAX_WORKING_DAYS", "26"))
STANDARD_WORKING_HOURS = float(os.getenv("STANDARD_WORKING_HOURS", "8"))

EMPLOYEE_SALARY_OVERRIDES = json.loads(os.getenv("EMPLOYEE_SALARY_OVERRIDES", "{}"))
