"""Tests for carry/borrow arithmetic on scalars and dates.

The moduli are fixed (30 days, 12 months) and deliberately not
calendar-accurate; several tests pin that approximation.
"""

import pytest

from datestr.domain.arithmetic import DAY_MODULUS, MONTH_MODULUS, borrow_sub, carry_add
from datestr.domain.date import Date
from datestr.domain.errors import InvalidDay, InvalidYear
from datestr.domain.parsing import parse, try_parse
from datestr.domain.scalars import Day, Month, Year


class TestCarryAdd:
    @pytest.mark.parametrize(
        "left,right,expected",
        [
            (1, 2, (3, 0)),
            (15, 15, (30, 0)),
            (25, 10, (5, 1)),
            (30, 30, (30, 1)),
            (30, 31, (1, 2)),
        ],
    )
    def test_day_modulus(self, left: int, right: int, expected: tuple[int, int]) -> None:
        assert carry_add(left, right, DAY_MODULUS) == expected

    def test_month_modulus(self) -> None:
        assert carry_add(11, 3, MONTH_MODULUS) == (2, 1)
        assert carry_add(12, 12, MONTH_MODULUS) == (12, 1)


class TestBorrowSub:
    @pytest.mark.parametrize(
        "left,right,expected",
        [
            (5, 4, (1, 0)),
            (4, 4, (30, 1)),
            (2, 5, (27, 1)),
            (1, 31, (30, 2)),
        ],
    )
    def test_day_modulus(self, left: int, right: int, expected: tuple[int, int]) -> None:
        assert borrow_sub(left, right, DAY_MODULUS) == expected

    def test_month_modulus(self) -> None:
        assert borrow_sub(3, 5, MONTH_MODULUS) == (10, 1)
        assert borrow_sub(1, 1, MONTH_MODULUS) == (12, 1)


class TestScalarOperators:
    def test_day_carry_uses_thirty_day_modulus(self) -> None:
        day, carry = Day.new(25) + Day.new(10)
        assert day == Day.new(5)
        assert carry == Month.new(1)

    def test_day_without_carry_yields_zero_month_count(self) -> None:
        day, carry = Day.new(10) + Day.new(5)
        assert day == Day.new(15)
        assert carry.value == 0

    def test_month_addition(self) -> None:
        assert Month.new(2) + Month.new(2) == (Month.new(4), Year.new(0))

    def test_month_addition_carries_into_year(self) -> None:
        assert Month.new(11) + Month.new(3) == (Month.new(2), Year.new(1))

    def test_day_subtraction_borrows(self) -> None:
        day, borrow = Day.new(2) - Day.new(5)
        assert day == Day.new(27)
        assert borrow == Month.new(1)

    def test_month_subtraction_borrows(self) -> None:
        assert Month.new(3) - Month.new(5) == (Month.new(10), Year.new(1))

    def test_year_addition(self) -> None:
        assert Year.new(2023) + Year.new(2) == Year.new(2025)

    def test_year_subtraction_underflow_is_recoverable(self) -> None:
        with pytest.raises(InvalidYear) as exc_info:
            Year.new(5) - Year.new(7)
        assert exc_info.value.year == -2

    def test_mixed_types_are_rejected(self) -> None:
        with pytest.raises(TypeError):
            Day.new(1) + Month.new(1)  # type: ignore[operator]


class TestDateAddition:
    def test_day_carry_propagates_to_month(self) -> None:
        assert parse("2023-01-25") + parse("0-2-10") == parse("2023-04-05")

    def test_month_carry_propagates_to_year(self) -> None:
        assert parse("2022-12-29") + parse("0-1-3") == parse("2023-02-02")

    def test_result_is_not_checked_against_ceiling(self) -> None:
        """Arithmetic can produce a day the month does not allow."""
        result = parse("2023-01-29") + parse("0-1-1")
        assert (result.year.value, result.month.value, result.day.value) == (2023, 2, 30)
        assert not result.is_valid()
        with pytest.raises(InvalidDay):
            Date.new(result.year, result.month, result.day)


class TestDateSubtraction:
    def test_component_difference(self) -> None:
        assert parse("2023-04-05") - parse("2023-01-04") == parse("0-3-1")

    def test_day_borrow(self) -> None:
        assert parse("2023-03-02") - parse("0-1-5") == parse("2023-01-27")

    def test_month_borrow_from_year(self) -> None:
        assert parse("2023-01-10") - parse("2022-02-05") == parse("0-11-5")

    def test_self_subtraction_borrows_past_year_zero(self) -> None:
        """Equal days and months each borrow once, so x - x underflows.

        This pins a deliberate departure from the often-quoted
        ``x - x == 0-3-1`` example, which the borrow rules cannot produce.
        """
        date = try_parse("2023-01-04")
        with pytest.raises(InvalidYear) as exc_info:
            date - date
        assert exc_info.value.year == -1

    def test_year_underflow(self) -> None:
        with pytest.raises(InvalidYear):
            parse("2022-06-15") - parse("2023-01-01")
