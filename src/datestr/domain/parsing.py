"""Parse ``YEAR-MONTH-DAY`` strings into :class:`Date` values.

Splitting is naive: the input is split on every ``-`` and fields 0, 1
and 2 are read; anything after the third field is ignored. There is no
sign handling. A stray separator (``"2023--11-02"``) yields an empty
field, which fails integer parsing; this is how "negative" fields are
rejected.

Two entry points share one pipeline:

- :func:`try_parse` raises a :class:`~datestr.domain.errors.DateError`.
- :func:`parse` treats unparsable year text as year 0 and raises
  :class:`~datestr.domain.errors.DatePanic` on anything else.

Fewer than three fields raises ``DatePanic`` from both.
"""

from __future__ import annotations

import re

from datestr.domain.date import Date
from datestr.domain.errors import DatePanic, InvalidParsing, aborting
from datestr.domain.scalars import Day, Month, Year

SEPARATOR = "-"

_UNSIGNED = re.compile(r"[0-9]+")


def _split_fields(text: str) -> tuple[str, str, str]:
    parts = text.split(SEPARATOR)
    if len(parts) < 3:
        msg = f"Expected YEAR{SEPARATOR}MONTH{SEPARATOR}DAY, got {text!r}"
        raise DatePanic(msg)
    return parts[0], parts[1], parts[2]


def _parse_unsigned(field: str) -> int:
    """Parse a plain decimal field: ASCII digits only, no sign, no spaces."""
    if _UNSIGNED.fullmatch(field) is None:
        raise InvalidParsing(field)
    try:
        return int(field)
    except ValueError as exc:
        # digit strings past the interpreter's int conversion limit
        raise InvalidParsing(field) from exc


def _build(text: str, *, lenient_year: bool) -> Date:
    year_text, month_text, day_text = _split_fields(text)
    try:
        year = _parse_unsigned(year_text)
    except InvalidParsing:
        if not lenient_year:
            raise
        year = 0
    month = _parse_unsigned(month_text)
    day = _parse_unsigned(day_text)
    return Date.new(Year.new(year), Month.new(month), Day.new(day))


def try_parse(text: str) -> Date:
    """Parse *text* into a Date.

    Raises:
        InvalidParsing: A field is not a non-negative decimal integer.
        InvalidMonth: The month is outside ``[1, 12]``.
        InvalidDay: The day is outside ``[1, 31]`` or above the month's ceiling.
        DatePanic: *text* has fewer than three fields.

    Examples:
        >>> str(try_parse("2023-1-2"))
        '2023-01-02'
    """
    return _build(text, lenient_year=False)


@aborting
def parse(text: str) -> Date:
    """Parse *text* into a Date, aborting on any invalid field.

    Unparsable year text defaults to year 0.

    Raises:
        DatePanic: On any invalid or missing field.
    """
    return _build(text, lenient_year=True)
