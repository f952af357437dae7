"""Timezone and calendar-date utilities."""

import re
from datetime import date, datetime
from typing import Optional

import pytz
from dateutil import parser as date_parser

from fintrack.config.settings import get_settings

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def app_timezone() -> pytz.BaseTzInfo:
    """Return the configured application timezone."""
    return pytz.timezone(get_settings().timezone)


def now_utc() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(pytz.UTC)


def today_local(tz: Optional[pytz.BaseTzInfo] = None) -> date:
    """Return today's date in the application timezone."""
    return datetime.now(tz or app_timezone()).date()


def parse_txn_date(value: str) -> date:
    """
    Parse a transaction date in YYYY-MM-DD form.

    Raises ValueError for any other shape or an impossible calendar date.
    """
    if not isinstance(value, str) or not _ISO_DATE_RE.match(value.strip()):
        raise ValueError(f"Invalid date (use YYYY-MM-DD): {value!r}")
    return date_parser.isoparse(value.strip()).date()
