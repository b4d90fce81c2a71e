"""Date and wall-clock helpers."""
import re
from datetime import date, datetime
from typing import Optional, Union

import pytz

from courtbook.core.exceptions import InvalidInputError

_WALL_CLOCK = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")
_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}(?:[T ].+)?$")


def parse_date(value: Optional[Union[str, date]], field: str = "date") -> date:
    """
    Parse a calendar date from request input.

    Accepts ``YYYY-MM-DD`` as well as full ISO-8601 datetimes such as
    ``2025-06-09T00:00:00.000Z``, in which case the date part is used.

    Args:
        value: Raw input
        field: Field name used in the error message

    Returns:
        The parsed date

    Raises:
        InvalidInputError: If the value is missing or not a valid date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if value is None or not str(value).strip():
        raise InvalidInputError(f"{field} is required")

    raw = str(value).strip()
    if not _ISO_DATE.match(raw):
        raise InvalidInputError(f"Invalid {field} format, expected YYYY-MM-DD")
    try:
        if len(raw) == 10:
            return datetime.strptime(raw, "%Y-%m-%d").date()
        return datetime.fromisoformat(raw.replace("Z", "+00:00")).date()
    except ValueError:
        raise InvalidInputError(f"Invalid {field} format, expected YYYY-MM-DD")


def weekday_index(day: date) -> int:
    """Day of week with Sunday as 0 and Saturday as 6."""
    return day.isoweekday() % 7


def facility_today(timezone_name: str = "UTC") -> date:
    """Current calendar date in the facility's timezone."""
    tz = pytz.timezone(timezone_name)
    return datetime.now(pytz.UTC).astimezone(tz).date()


def validate_wall_clock(value: str, field: str = "time") -> str:
    """Check an ``HH:MM`` 24-hour time string and return it unchanged."""
    if not isinstance(value, str) or not _WALL_CLOCK.match(value):
        raise InvalidInputError(f"{field} must be in HH:MM format")
    return value
