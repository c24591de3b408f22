import json
import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "payroll_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

# Holiday calendar location (ISO country code + optional subdivision)
HOLIDAY_COUNTRY = os.getenv("HOLIDAY_COUNTRY", "IN")
HOLIDAY_STATE = os.getenv("HOLIDAY_STATE", "DL")

# Salary defaults, used when an employee has no override
DEFAULT_BASE_SALARY = float(os.getenv("DEFAULT_BASE_SALARY", "8000"))
DEFAULT_DAILY_WAGE = float(os.getenv("DEFAULT_DAILY_WAGE", "258"))
MAX_WORKING_DAYS = int(os.getenv("MAX_WORKING_DAYS", "26"))
STANDARD_WORKING_HOURS = float(os.getenv("STANDARD_WORKING_HOURS", "8"))

# Per-employee overrides keyed by employee id or name, e.g.
# {"E002": {"base_salary": 25000, "salary_calculation_method": "proportional"}}
EMPLOYEE_SALARY_OVERRIDES = json.loads(os.getenv("EMPLOYEE_SALARY_OVERRIDES", "{}"))
