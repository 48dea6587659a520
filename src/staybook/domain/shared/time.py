"""Time utilities for the domain layer."""

import calendar
import re
from datetime import date, datetime, timezone

# ISO 8601 date-time: a date, a "T", a time; fraction and offset optional
_ISO_DATE_TIME = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2}(\.\d{1,6})?)?"
    r"(Z|[+-]\d{2}:?\d{2})?$",
)


def utc_now() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(tz=timezone.utc)


def today_utc() -> date:
    """Return current date in UTC (timezone-aware)."""
    return datetime.now(tz=timezone.utc).date()


def ensure_tz_aware(dt: datetime) -> datetime:
    """Ensure datetime is timezone-aware (UTC if naive)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO 8601 date-time string into an aware UTC datetime.

    Raises
    ------
    ValueError
        If the value is not a date-time in the accepted profile
    """
    text = value.strip() if isinstance(value, str) else ""
    if not _ISO_DATE_TIME.match(text):
        msg = f"Not an ISO 8601 date-time: {value!r}"
        raise ValueError(msg)

    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    return ensure_tz_aware(datetime.fromisoformat(text)).astimezone(timezone.utc)


def add_months(day: date, months: int) -> date:
    """Shift a date by whole months, clamping to the end of the month."""
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def years_between(start: date, end: date) -> int:
    """Whole years elapsed from start to end (age calculation)."""
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years
