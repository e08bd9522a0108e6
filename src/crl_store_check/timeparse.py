"""Conversion between OpenSSL display timestamps and epoch seconds."""

import re
from datetime import datetime, timezone

from crl_store_check.exceptions import TimestampParseError

# Month names are fixed so parsing does not depend on the process locale
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_TIMESTAMP_RE = re.compile(
    r"^(?P<month>[A-Za-z]{3})\s+(?P<day>\d{1,2})\s+"
    r"(?P<hour>\d{1,2}):(?P<minute>\d{2}):(?P<second>\d{2})\s+"
    r"(?P<year>\d{4})(?:\s+(?P<zone>[A-Za-z]+))?$"
)

_UTC_ZONES = {"GMT", "UTC", "Z"}


def parse_timestamp(raw: str) -> int:
    """
    Parse a timestamp such as ``"Jan  5 09:00:00 2027 GMT"``.

    Args:
        raw: Timestamp text, timezone token optional (UTC assumed)

    Returns:
        Seconds since the epoch

    Raises:
        TimestampParseError: if the text is not a valid calendar date
    """
    match = _TIMESTAMP_RE.match(raw.strip()) if raw else None
    if not match:
        raise TimestampParseError(raw)

    zone = match.group("zone")
    if zone is not None and zone.upper() not in _UTC_ZONES:
        raise TimestampParseError(raw)

    month_name = match.group("month").capitalize()
    if month_name not in MONTHS:
        raise TimestampParseError(raw)

    try:
        value = datetime(
            int(match.group("year")),
            MONTHS.index(month_name) + 1,
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second")),
            tzinfo=timezone.utc,
        )
    except ValueError:
        raise TimestampParseError(raw)

    return int(value.timestamp())


def format_timestamp(value: datetime) -> str:
    """Render a datetime the way ``openssl crl -lastupdate`` prints it."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return (
        f"{MONTHS[value.month - 1]} {value.day:2d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d} {value.year} GMT"
    )
