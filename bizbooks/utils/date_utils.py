"""Date manipulation utilities"""

from datetime import date, timedelta
from typing import List, Tuple
from bizbooks.domain.exceptions import InvalidPeriodError


def generate_date_range(start: date, end: date) -> List[date]:
    """Generate list of dates from start to end (inclusive)"""
    days = (end - start).days + 1
    return [start + timedelta(days=i) for i in range(days)]


def trailing_window(end: date, days: int) -> Tuple[date, date]:
    """Return (start, end) covering the `days` days before end, plus end itself"""
    return end - timedelta(days=days), end


def validate_period(start: date, end: date) -> None:
    """Raise InvalidPeriodError when start falls after end"""
    if start > end:
        raise InvalidPeriodError(f"Period start {start} is after end {end}")
