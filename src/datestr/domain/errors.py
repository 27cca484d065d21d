"""Error taxonomy for date construction, parsing, and formatting.

Two failure tiers:

- Checked: a :class:`DateError` subclass carrying the offending value.
  Raised by ``new``, ``try_parse``, ``DateFormat.from_template`` and the
  other ``try_*`` entry points.
- Optimistic: :class:`DatePanic`, raised by ``parse``, ``Date.of`` and
  ``to_datestr``. It sits outside the ``DateError`` hierarchy so that an
  ``except DateError`` handler never swallows it.

The optimistic entry points are produced by :func:`aborting`, which wraps
the checked callable; validation is never duplicated.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, ClassVar, ParamSpec, TypeVar

P = ParamSpec("P")
R = TypeVar("R")


class DateError(ValueError):
    """Base class for all recoverable date errors."""

    code: ClassVar[str] = "DATE_ERROR"

    @property
    def detail(self) -> dict[str, Any]:
        """Offending value(s), keyed by field name."""
        return {}


class InvalidMonth(DateError):
    """Month outside ``[1, 12]``."""

    code = "INVALID_MONTH"

    def __init__(self, month: int) -> None:
        self.month = month
        super().__init__(f"Month must be within 1..12, got {month}")

    @property
    def detail(self) -> dict[str, Any]:
        return {"month": self.month}


class InvalidDay(DateError):
    """Day outside ``[1, 31]`` or above the month's ceiling."""

    code = "INVALID_DAY"

    def __init__(self, day: int, *, ceiling: int = 31) -> None:
        self.day = day
        self.ceiling = ceiling
        super().__init__(f"Day must be within 1..{ceiling}, got {day}")

    @property
    def detail(self) -> dict[str, Any]:
        return {"day": self.day, "ceiling": self.ceiling}


class InvalidYear(DateError):
    """Year would be negative (construction or subtraction underflow)."""

    code = "INVALID_YEAR"

    def __init__(self, year: int) -> None:
        self.year = year
        super().__init__(f"Year must be non-negative, got {year}")

    @property
    def detail(self) -> dict[str, Any]:
        return {"year": self.year}


class InvalidParsing(DateError):
    """A field's text is not a non-negative decimal integer."""

    code = "INVALID_PARSING"

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Not a non-negative integer: {text!r}")

    @property
    def detail(self) -> dict[str, Any]:
        return {"text": self.text}


class FormatError(DateError):
    """A format template is missing ``YYYY``, ``MM`` or ``DD``."""

    code = "INVALID_FORMAT"

    def __init__(self, template: str) -> None:
        self.template = template
        super().__init__(f"Format not recognized: {template!r}")

    @property
    def detail(self) -> dict[str, Any]:
        return {"template": self.template}


class DatePanic(RuntimeError):
    """Abnormal termination of an optimistic operation.

    Not a :class:`DateError`: callers of the optimistic API are not
    expected to recover from it.
    """

    code: ClassVar[str] = "MALFORMED_INPUT"


def aborting(func: Callable[P, R]) -> Callable[P, R]:
    """Turn a checked callable into its optimistic counterpart.

    Any :class:`DateError` raised by *func* is re-raised as
    :class:`DatePanic` with the original chained as ``__cause__``.
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except DateError as exc:
            raise DatePanic(str(exc)) from exc

    return wrapper
