"""Date manipulation utilities"""

from datetime import date, datetime, time, timedelta
from typing import Tuple


def day_bounds(day: date) -> Tuple[datetime, datetime]:
    """Half-open [start, end) datetime range covering a whole calendar day"""
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def format_reference_date(day: date) -> str:
    """ISO yyyy-mm-dd representation used in API responses"""
    return day.isoformat()
