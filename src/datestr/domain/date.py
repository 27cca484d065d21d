"""The Date aggregate: one Year, one Month, one Day.

INVARIANT: a Date built through :meth:`Date.new` never holds a day above
its month's ceiling. Dates produced by arithmetic are assembled without
re-checking the ceiling table and may break this (e.g. day 30 in
February); :meth:`Date.is_valid` reports it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from pydantic import BaseModel

from datestr.domain.errors import InvalidDay, aborting
from datestr.domain.scalars import Day, Month, Year

if TYPE_CHECKING:
    from datestr.domain.formatting import DateFormat

# Fixed table, no leap-year awareness: February always allows 29.
MONTH_CEILINGS: dict[int, int] = {
    1: 31,
    2: 29,
    3: 31,
    4: 30,
    5: 31,
    6: 30,
    7: 31,
    8: 31,
    9: 30,
    10: 31,
    11: 30,
    12: 31,
}


def max_day(month: Month) -> int:
    """Return the last valid day of *month* (inclusive)."""
    return MONTH_CEILINGS[month.value]


class Date(BaseModel):
    """A calendar date held as validated components.

    Attributes:
        year: Non-negative year.
        month: Month in ``[1, 12]``.
        day: Day in ``[1, max_day(month)]``.
    """

    model_config = {"frozen": True}

    year: Year
    month: Month
    day: Day

    @classmethod
    def new(cls, year: Year, month: Month, day: Day) -> Self:
        """Assemble a Date, checking *day* against the month's ceiling.

        Raises:
            InvalidDay: If *day* exceeds ``max_day(month)``.
        """
        ceiling = max_day(month)
        if day.value > ceiling:
            raise InvalidDay(day.value, ceiling=ceiling)
        return cls(year=year, month=month, day=day)

    @classmethod
    def from_parts(cls, year: int, month: int, day: int) -> Self:
        """Checked construction from plain integers."""
        return cls.new(Year.new(year), Month.new(month), Day.new(day))

    @classmethod
    def of(cls, year: int, month: int, day: int) -> Self:
        """Optimistic construction from plain integers.

        Raises:
            DatePanic: On any invalid component.
        """
        return aborting(cls.from_parts)(year, month, day)

    @classmethod
    def _unchecked(cls, year: Year, month: Month, day: Day) -> Self:
        return cls.model_construct(year=year, month=month, day=day)

    def is_valid(self) -> bool:
        """Whether this date would pass :meth:`new`."""
        return (
            1 <= self.month.value <= 12
            and 1 <= self.day.value <= max_day(self.month)
            and self.year.value >= 0
        )

    def format(self, fmt: DateFormat) -> str:
        """Render through *fmt* with unpadded numbers."""
        return fmt.render(self)

    def try_format(self, fmt: DateFormat) -> str:
        """Checked alias of :meth:`format`; a validated template cannot fail."""
        return fmt.render(self)

    def __add__(self, other: Date) -> Date:
        """Add component-wise, carrying day -> month -> year."""
        if not isinstance(other, Date):
            return NotImplemented
        day, day_carry = self.day + other.day
        month, year_carry = self.month + other.month
        month, month_carry = month + day_carry
        year = self.year + other.year + year_carry + month_carry
        return Date._unchecked(year, month, day)

    def __sub__(self, other: Date) -> Date:
        """Subtract component-wise, borrowing year -> month -> day.

        Raises:
            InvalidYear: If the borrows take the year below zero.
        """
        if not isinstance(other, Date):
            return NotImplemented
        day, day_borrow = self.day - other.day
        month, year_borrow = self.month - other.month
        month, month_borrow = month - day_borrow
        year = self.year - other.year - year_borrow - month_borrow
        return Date._unchecked(year, month, day)

    def __str__(self) -> str:
        return f"{self.year.value}-{self.month.value:02d}-{self.day.value:02d}"
