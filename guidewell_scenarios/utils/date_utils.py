"""Date manipulation utilities"""

import calendar
import math
from datetime import date, timedelta

AVERAGE_DAYS_PER_MONTH = 30.44


def add_months(from_date: date, months: int) -> date:
    """Add calendar months, clamping the day to the end of shorter months (Jan 31 + 1 -> Feb 28/29)"""
    month_index = from_date.month - 1 + months
    year = from_date.year + month_index // 12
    month = month_index % 12 + 1
    day = min(from_date.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def lookback_start(as_of: date, lookback_days: int) -> date:
    """First day included in a lookback window ending on as_of"""
    return as_of - timedelta(days=lookback_days)


def months_between(start: date, end: date) -> int:
    """Whole months from start to end using an average month length, at least 1"""
    days = (end - start).days
    return max(1, math.ceil(days / AVERAGE_DAYS_PER_MONTH))


def whole_months_until(start: date, end: date) -> int:
    """Calendar month difference (ignores day of month), never negative"""
    return max(0, (end.year - start.year) * 12 + (end.month - start.month))
