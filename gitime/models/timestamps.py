"""Parsing of git's default date layout.

``git show --date=default --pretty=%ad`` prints author dates like
``Mon Jan 2 15:04:05 2006 -0700``. The names are always English, so the
layout is matched here without going through the process locale, which
``time.strptime`` would consult for ``%a`` and ``%b``.
"""

import re
from datetime import datetime, timedelta, timezone

from ..errors import TimestampParseError

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

GIT_DATE_PATTERN = re.compile(
    r"^(?P<weekday>[A-Z][a-z]{2}) "
    r"(?P<month>[A-Z][a-z]{2}) "
    r"(?P<day>\d{1,2}) "
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2}) "
    r"(?P<year>\d{4}) "
    r"(?P<sign>[+-])(?P<tz_hours>\d{2})(?P<tz_minutes>\d{2})$"
)


def parse_git_date(text: str) -> datetime:
    """Parse a git default-format date into a timezone-aware datetime.

    Raises:
        TimestampParseError: if ``text`` does not match the layout exactly or
            names an impossible date.
    """
    match = GIT_DATE_PATTERN.match(text)
    if not match:
        raise TimestampParseError(text)

    fields = match.groupdict()
    if fields["weekday"] not in WEEKDAYS or fields["month"] not in MONTHS:
        raise TimestampParseError(text)

    offset = timedelta(
        hours=int(fields["tz_hours"]), minutes=int(fields["tz_minutes"])
    )
    if fields["sign"] == "-":
        offset = -offset

    try:
        return datetime(
            int(fields["year"]),
            MONTHS.index(fields["month"]) + 1,
            int(fields["day"]),
            int(fields["hour"]),
            int(fields["minute"]),
            int(fields["second"]),
            tzinfo=timezone(offset),
        )
    except ValueError as e:
        raise TimestampParseError(text) from e
