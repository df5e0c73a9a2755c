"""Date, name, and person formatting helpers.

Free-text person queries look like ``"Doe John Michael 01.01.2000"``:
last name, first name, optional middle name, optional trailing date of birth.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import date, datetime, time
from typing import Any, NotRequired, TypedDict

from dateutil import parser as date_parser

NO_DATA = "No data"

DATE_FORMAT = "%d %b %Y"
DATETIME_FORMAT = "%B %d, %Y %H:%M:%S"
DOB_FORMAT = "%d.%m.%Y"

SECONDS_IN_A_YEAR = 31_536_000


class PersonQuery(TypedDict):
    """Parsed person query. ``dob`` is present only when it parsed."""

    last_name: str | None
    first_name: str | None
    middle_name: str | None
    dob: NotRequired[date]


def format_date(value: date | None) -> str:
    """Format as ``05 Oct 2023``, or ``No data`` when missing."""
    return value.strftime(DATE_FORMAT) if value else NO_DATA


def format_datetime(value: datetime | None) -> str:
    """Format as ``October 05, 2023 14:30:00``, or ``No data`` when missing."""
    return value.strftime(DATETIME_FORMAT) if value else NO_DATA


def capitalize_each_word(text: str) -> str:
    return " ".join(word.capitalize() for word in text.split())


def parse_date(token: str) -> date | None:
    """Parse a free-form date token, day first unless it starts with a year.

    Missing parts are taken from the current month, with the day defaulting
    to the 1st.

    Examples:
        >>> parse_date("05.10.2023")
        datetime.date(2023, 10, 5)
        >>> parse_date("2023-10-05")
        datetime.date(2023, 10, 5)
        >>> parse_date("tomorrow") is None
        True
    """
    default = datetime.combine(date.today().replace(day=1), time())
    try:
        parsed = date_parser.parse(token, dayfirst=not token[:4].isdigit(), default=default)
    except (ValueError, OverflowError):
        return None
    return parsed.date()


def estimate_person_age(text: Any, *, now: datetime | None = None) -> str | None:
    """Age from the trailing date token of *text*, as ``"23 y.o."``.

    Uses a flat 365-day year, so results near a birthday may be off by one.
    The date of birth is taken as midnight in the timezone of *now*.
    Returns None for non-string input or when no date can be parsed.
    """
    if not isinstance(text, str):
        return None
    tokens = text.split()
    if not tokens:
        return None
    dob = parse_date(tokens[-1])
    if dob is None:
        return None

    current = now or datetime.now()
    born = datetime.combine(dob, time(), tzinfo=current.tzinfo)
    elapsed = (current - born).total_seconds()
    return f"{math.floor(elapsed / SECONDS_IN_A_YEAR)} y.o."


def parse_name_and_dob(text: str | None) -> PersonQuery:
    """Split a person query into capitalized name parts and date of birth.

    The third token is the middle name only if it contains no digits.
    """
    tokens = (text or "").split()

    def _token(index: int) -> str | None:
        return tokens[index] if len(tokens) > index else None

    middle = _token(2)
    if middle is not None and any(ch.isdigit() for ch in middle):
        middle = None

    last, first = _token(0), _token(1)
    query: PersonQuery = {
        "last_name": last.capitalize() if last else None,
        "first_name": first.capitalize() if first else None,
        "middle_name": middle.capitalize() if middle else None,
    }
    if tokens:
        dob = parse_date(tokens[-1])
        if dob is not None:
            query["dob"] = dob
    return query


def format_name_and_dob(record: Any) -> str:
    """Join a :class:`PersonQuery` back into ``"Doe John Michael 01.01.2000"``.

    Anything that is not a mapping formats as an empty string.
    """
    if not isinstance(record, Mapping):
        return ""

    parts = [record.get("last_name"), record.get("first_name"), record.get("middle_name")]
    dob = record.get("dob")
    if dob:
        parts.append(dob.strftime(DOB_FORMAT))
    return " ".join(part for part in parts if part is not None)


def reformat_name_and_dob(text: str | None) -> str:
    """Normalize a person query: capitalize names, canonical DOB format."""
    return format_name_and_dob(parse_name_and_dob(text))
