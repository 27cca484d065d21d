"""Convenience conversion of strings and dates into :class:`Date`."""

from __future__ import annotations

from datestr.domain.date import Date
from datestr.domain.parsing import parse, try_parse


def to_datestr(value: str | Date) -> Date:
    """Optimistic conversion; a Date is returned unchanged.

    Raises:
        DatePanic: If *value* is a string that does not parse.
    """
    if isinstance(value, Date):
        return value
    return parse(value)


def try_to_datestr(value: str | Date) -> Date:
    """Checked conversion.

    A Date is re-validated by parsing its canonical rendering, so one
    produced by arithmetic that breaks the ceiling table is rejected.

    Raises:
        DateError: If *value* does not parse or does not validate.
    """
    if isinstance(value, Date):
        return try_parse(str(value))
    return try_parse(value)
