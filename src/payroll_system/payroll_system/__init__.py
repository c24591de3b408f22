"""Payroll System package.

Organized by feature modules (holiday_calendar, working_days, attendance,
payroll, ...) with a thin Flask controller layer over service and
repository layers. The salary calculation core never raises past its own
boundary; every fallback is flagged on the value it returns.
"""
