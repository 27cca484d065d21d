"""datestr: validated ``YYYY-MM-DD`` date strings.

Parsing, validation, custom formatting, and carry-propagating arithmetic
for calendar dates held as strings. Not a date/time library: there is no
time of day, no timezone, and no leap-year awareness.
"""

from __future__ import annotations

from datestr.domain.conversion import to_datestr, try_to_datestr
from datestr.domain.date import Date
from datestr.domain.errors import (
    DateError,
    DatePanic,
    FormatError,
    InvalidDay,
    InvalidMonth,
    InvalidParsing,
    InvalidYear,
)
from datestr.domain.formatting import DateFormat
from datestr.domain.parsing import parse, try_parse
from datestr.domain.scalars import Day, Month, Year

__version__ = "0.3.0"

__all__ = [
    "Date",
    "DateError",
    "DateFormat",
    "DatePanic",
    "Day",
    "FormatError",
    "InvalidDay",
    "InvalidMonth",
    "InvalidParsing",
    "InvalidYear",
    "Month",
    "Year",
    "__version__",
    "parse",
    "to_datestr",
    "try_parse",
    "try_to_datestr",
]
