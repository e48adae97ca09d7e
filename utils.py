"""
Date helpers for the DD-MM-YYYY layout used across the API.
"""
import re
from datetime import date, datetime

import pytz

import config
from errors import InvalidDateFormat

DATE_FORMAT = "%d-%m-%Y"
_DATE_LAYOUT = re.compile(r"[0-9]{2}-[0-9]{2}-[0-9]{4}")


def parse_date(text: str, field: str = "date") -> date:
    """Parse a DD-MM-YYYY string, raising InvalidDateFormat for anything else.

    strptime alone accepts unpadded days and months and non-ASCII digits, so
    the layout is checked first.
    """
    if not _DATE_LAYOUT.fullmatch(text):
        raise InvalidDateFormat(field)
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        raise InvalidDateFormat(field)


def format_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)


def is_before(a: date, b: date) -> bool:
    return a < b


def is_after(a: date, b: date) -> bool:
    return a > b


def now_local() -> datetime:
    """Current time in the configured timezone"""
    return datetime.now(pytz.timezone(config.TIMEZONE))
