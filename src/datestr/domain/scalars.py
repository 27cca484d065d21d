"""Validated scalar components: Year, Month, Day.

Each scalar is a frozen pydantic model wrapping a single ``value``.
``new()`` is the validating constructor and raises the matching
:class:`~datestr.domain.errors.DateError`. ``_unchecked()`` skips
validation and exists only for arithmetic results that are in range by
construction (or that carry a bare count, such as a zero-month carry).

Month and Day do not know about each other; the per-month ceiling is
enforced by :class:`~datestr.domain.date.Date`.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field

from datestr.domain.arithmetic import (
    DAY_MODULUS,
    MONTH_MODULUS,
    borrow_sub,
    carry_add,
)
from datestr.domain.errors import InvalidDay, InvalidMonth, InvalidYear

MONTH_MIN = 1
MONTH_MAX = 12
DAY_MIN = 1
DAY_MAX = 31


class Year(BaseModel):
    """Non-negative year with no upper bound."""

    model_config = {"frozen": True}

    value: int = Field(ge=0)

    @classmethod
    def new(cls, value: int) -> Self:
        if value < 0:
            raise InvalidYear(value)
        return cls(value=value)

    @classmethod
    def _unchecked(cls, value: int) -> Self:
        return cls.model_construct(value=value)

    def __add__(self, other: Year) -> Year:
        if not isinstance(other, Year):
            return NotImplemented
        return Year._unchecked(self.value + other.value)

    def __sub__(self, other: Year) -> Year:
        """Plain subtraction; going below zero raises :class:`InvalidYear`."""
        if not isinstance(other, Year):
            return NotImplemented
        diff = self.value - other.value
        if diff < 0:
            raise InvalidYear(diff)
        return Year._unchecked(diff)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


class Month(BaseModel):
    """Month of the year, 1-indexed (January is 1)."""

    model_config = {"frozen": True}

    value: int = Field(ge=MONTH_MIN, le=MONTH_MAX)

    @classmethod
    def new(cls, value: int) -> Self:
        if not MONTH_MIN <= value <= MONTH_MAX:
            raise InvalidMonth(value)
        return cls(value=value)

    @classmethod
    def _unchecked(cls, value: int) -> Self:
        return cls.model_construct(value=value)

    def __add__(self, other: Month) -> tuple[Month, Year]:
        """Return ``(month, year_carry)`` under the 12-month modulus."""
        if not isinstance(other, Month):
            return NotImplemented
        month, carry = carry_add(self.value, other.value, MONTH_MODULUS)
        return Month._unchecked(month), Year._unchecked(carry)

    def __sub__(self, other: Month) -> tuple[Month, Year]:
        """Return ``(month, year_borrow)`` under the 12-month modulus."""
        if not isinstance(other, Month):
            return NotImplemented
        month, borrow = borrow_sub(self.value, other.value, MONTH_MODULUS)
        return Month._unchecked(month), Year._unchecked(borrow)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


class Day(BaseModel):
    """Day of the month, ``[1, 31]`` regardless of month."""

    model_config = {"frozen": True}

    value: int = Field(ge=DAY_MIN, le=DAY_MAX)

    @classmethod
    def new(cls, value: int) -> Self:
        if not DAY_MIN <= value <= DAY_MAX:
            raise InvalidDay(value)
        return cls(value=value)

    @classmethod
    def _unchecked(cls, value: int) -> Self:
        return cls.model_construct(value=value)

    def __add__(self, other: Day) -> tuple[Day, Month]:
        """Return ``(day, month_carry)`` under the 30-day modulus.

        The carry is a bare count wrapped in a Month and may be zero.
        """
        if not isinstance(other, Day):
            return NotImplemented
        day, carry = carry_add(self.value, other.value, DAY_MODULUS)
        return Day._unchecked(day), Month._unchecked(carry)

    def __sub__(self, other: Day) -> tuple[Day, Month]:
        """Return ``(day, month_borrow)`` under the 30-day modulus."""
        if not isinstance(other, Day):
            return NotImplemented
        day, borrow = borrow_sub(self.value, other.value, DAY_MODULUS)
        return Day._unchecked(day), Month._unchecked(borrow)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
