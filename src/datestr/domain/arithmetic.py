"""Carry and borrow rules for component arithmetic.

Fixed moduli, not calendar lengths: a "month" of days is always 30 and a
"year" of months is always 12. Leap years and real month lengths are
ignored. These helpers work on plain magnitudes; the scalar types wrap
them in :mod:`datestr.domain.scalars`.
"""

from __future__ import annotations

DAY_MODULUS = 30
MONTH_MODULUS = 12


def carry_add(left: int, right: int, modulus: int) -> tuple[int, int]:
    """Add two magnitudes, carrying into the next unit.

    While the sum exceeds *modulus*, subtract *modulus* and carry one.

    Examples:
        >>> carry_add(25, 10, DAY_MODULUS)
        (5, 1)
        >>> carry_add(30, 30, DAY_MODULUS)
        (30, 1)
        >>> carry_add(2, 2, MONTH_MODULUS)
        (4, 0)
    """
    total = left + right
    carry = 0
    while total > modulus:
        total -= modulus
        carry += 1
    return total, carry


def borrow_sub(left: int, right: int, modulus: int) -> tuple[int, int]:
    """Subtract two magnitudes, borrowing from the next unit.

    A positive difference needs no borrow. Otherwise *modulus* is added
    (one borrow each time) until the result is positive, so an exact zero
    lands on *modulus* itself with a single borrow.

    Examples:
        >>> borrow_sub(5, 4, DAY_MODULUS)
        (1, 0)
        >>> borrow_sub(4, 4, DAY_MODULUS)
        (30, 1)
        >>> borrow_sub(1, 40, DAY_MODULUS)
        (21, 2)
    """
    diff = left - right
    borrow = 0
    while diff <= 0:
        diff += modulus
        borrow += 1
    return diff, borrow
