"""Date manipulation utilities"""

from datetime import date, datetime


def parse_date(value: str, fmt: str) -> date:
    """
    Parse a date string that is spelled exactly as fmt renders it.

    strptime also accepts unpadded fields ("1.2.1990" for "%d.%m.%Y"); those
    are rejected so one date has one stored spelling.

    Raises:
        ValueError/TypeError: On unparsable or non-canonical input
    """
    parsed = datetime.strptime(value, fmt)
    if parsed.strftime(fmt) != value:
        raise ValueError(f"Date {value!r} does not match format {fmt!r}")
    return parsed.date()


def full_years_between(start: date, end: date) -> int:
    """Whole years elapsed from start to end (negative if start is in the future)"""
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years
