"""Calendar date parsing and display helpers."""

from __future__ import annotations

from datetime import date, datetime

from dateutil.parser import isoparse

DEFAULT_DATE_FORMAT = "%d %b %Y"


def parse_calendar_date(value: object) -> date:
    """Coerce front-matter values into a :class:`datetime.date`.

    YAML already turns ``2025-06-04`` into a ``date``; datetimes are truncated
    and strings must be ISO-8601.

    Raises:
        ValueError: If the value is not a recognisable calendar date.

    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            msg = "empty date"
            raise ValueError(msg)
        return isoparse(text).date()
    msg = f"unsupported date value of type {type(value).__name__}"
    raise ValueError(msg)


def format_display_date(value: date, fmt: str = DEFAULT_DATE_FORMAT) -> str:
    """Format a date for the article byline, e.g. ``04 Jun 2025``."""
    return value.strftime(fmt)
