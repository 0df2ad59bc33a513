"""Date manipulation utilities"""

from datetime import date
from dateutil.relativedelta import relativedelta


def days_between(start: date, end: date) -> int:
    """Whole days from start to end (negative when end is in the past)"""
    return (end - start).days


def add_months(from_date: date, months: int) -> date:
    """Add calendar months, clamping to the last day of shorter months"""
    return from_date + relativedelta(months=months)
