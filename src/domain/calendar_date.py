"""Calendar date text encoding (YYYY-MM-DD) shared by the API and the store"""

import re
from datetime import date

DATE_ONLY_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def parse_date_only(value: str) -> date:
    """
    Parse a YYYY-MM-DD string into a date

    Raises:
        ValueError: value is not a valid YYYY-MM-DD date
    """
    match = DATE_ONLY_PATTERN.fullmatch(value or "")
    if not match:
        raise ValueError(f"{value!r} is not formatted as YYYY-MM-DD")
    year, month, day = (int(part) for part in match.groups())
    return date(year, month, day)


def format_date_only(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
