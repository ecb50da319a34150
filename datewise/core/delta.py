"""CalendarDelta class representing a bag of signed calendar-unit amounts.

This module provides the CalendarDelta class, the argument to calendar
arithmetic. A delta carries an amount for any subset of the units in
CalendarUnit; units that are absent contribute nothing.
"""

from __future__ import annotations

from typing import Iterator, Mapping, Union

from datewise.errors import ValidationError
from datewise.units.calendarunit import CalendarUnit

UnitKey = Union[CalendarUnit, str]


def _check_amount(unit: CalendarUnit, amount: object) -> int:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValidationError(
            f"{unit.value} amount must be an integer, got {type(amount).__name__}"
        )
    return amount


class CalendarDelta:
    """A signed quantity per calendar unit, applied by calendar arithmetic.

    Only the units given at construction are present. An absent unit is
    not "unspecified": it simply adds zero. Amounts are stored as given,
    without normalization, so CalendarDelta(months=14) stays 14 months.

    CalendarDelta values are immutable.

    Attributes:
        years, months, weeks, days, hours, minutes, seconds: The amount
            for each unit (0 when the unit is absent).

    Examples:
        >>> d = CalendarDelta(years=1, months=2)
        >>> d.months
        2
        >>> d.units
        (<CalendarUnit.YEAR: 'year'>, <CalendarUnit.MONTH: 'month'>)

        >>> CalendarDelta.from_mapping({"day": 3, "hours": -2})
        CalendarDelta(days=3, hours=-2)

        >>> -CalendarDelta(weeks=1)
        CalendarDelta(weeks=-1)
    """

    __slots__ = ("_amounts",)

    def __init__(
        self,
        years: int | None = None,
        months: int | None = None,
        weeks: int | None = None,
        days: int | None = None,
        hours: int | None = None,
        minutes: int | None = None,
        seconds: int | None = None,
    ) -> None:
        """Create a CalendarDelta from per-unit amounts.

        Arguments left as None are absent from the delta. All amounts
        can be positive, negative, or zero.

        Raises:
            ValidationError: If an amount is not an integer.
        """
        given = (
            (CalendarUnit.YEAR, years),
            (CalendarUnit.MONTH, months),
            (CalendarUnit.WEEK, weeks),
            (CalendarUnit.DAY, days),
            (CalendarUnit.HOUR, hours),
            (CalendarUnit.MINUTE, minutes),
            (CalendarUnit.SECOND, seconds),
        )
        self._amounts: dict[CalendarUnit, int] = {
            unit: _check_amount(unit, amount) for unit, amount in given if amount is not None
        }

    @classmethod
    def _from_amounts(cls, amounts: Mapping[CalendarUnit, int]) -> CalendarDelta:
        instance = object.__new__(cls)
        instance._amounts = {unit: amounts[unit] for unit in CalendarUnit if unit in amounts}
        return instance

    @classmethod
    def of(cls, unit: UnitKey, amount: int) -> CalendarDelta:
        """Create a single-unit delta.

        Args:
            unit: A CalendarUnit or unit name ("month", "days", ...).
            amount: The signed amount.

        Raises:
            ValidationError: If the unit name is unknown or amount not an int.

        Examples:
            >>> CalendarDelta.of("month", 3)
            CalendarDelta(months=3)
        """
        resolved = CalendarUnit.from_name(unit)
        return cls._from_amounts({resolved: _check_amount(resolved, amount)})

    @classmethod
    def from_mapping(cls, mapping: Mapping[UnitKey, int]) -> CalendarDelta:
        """Create a delta from a {unit: amount} mapping.

        Keys may be CalendarUnit members or unit names. Two keys naming
        the same unit ("day" and "days") are summed.

        Raises:
            ValidationError: If a key is not a unit name or an amount not an int.
        """
        amounts: dict[CalendarUnit, int] = {}
        for key, amount in mapping.items():
            unit = CalendarUnit.from_name(key)
            amounts[unit] = amounts.get(unit, 0) + _check_amount(unit, amount)
        return cls._from_amounts(amounts)

    @classmethod
    def zero(cls) -> CalendarDelta:
        """Create an empty delta (no units present)."""
        return cls()

    def get(self, unit: UnitKey) -> int | None:
        """Return the amount for a unit, or None if the unit is absent."""
        return self._amounts.get(CalendarUnit.from_name(unit))

    def amount(self, unit: UnitKey) -> int:
        """Return the amount for a unit, 0 if the unit is absent."""
        return self._amounts.get(CalendarUnit.from_name(unit), 0)

    @property
    def years(self) -> int:
        return self._amounts.get(CalendarUnit.YEAR, 0)

    @property
    def months(self) -> int:
        return self._amounts.get(CalendarUnit.MONTH, 0)

    @property
    def weeks(self) -> int:
        return self._amounts.get(CalendarUnit.WEEK, 0)

    @property
    def days(self) -> int:
        return self._amounts.get(CalendarUnit.DAY, 0)

    @property
    def hours(self) -> int:
        return self._amounts.get(CalendarUnit.HOUR, 0)

    @property
    def minutes(self) -> int:
        return self._amounts.get(CalendarUnit.MINUTE, 0)

    @property
    def seconds(self) -> int:
        return self._amounts.get(CalendarUnit.SECOND, 0)

    @property
    def units(self) -> tuple[CalendarUnit, ...]:
        """Return the present units, most significant first."""
        return tuple(self._amounts)

    @property
    def total_months(self) -> int:
        """Return years * 12 + months.

        Examples:
            >>> CalendarDelta(years=1, months=2).total_months
            14
        """
        return self.years * 12 + self.months

    @property
    def total_days(self) -> int:
        """Return weeks * 7 + days."""
        return self.weeks * 7 + self.days

    @property
    def time_seconds(self) -> int:
        """Return the exact elapsed part, hours * 3600 + minutes * 60 + seconds."""
        return self.hours * 3600 + self.minutes * 60 + self.seconds

    @property
    def is_zero(self) -> bool:
        """Return True if every present amount is zero."""
        return not any(self._amounts.values())

    def items(self) -> Iterator[tuple[CalendarUnit, int]]:
        """Iterate (unit, amount) pairs, most significant unit first."""
        return iter(self._amounts.items())

    def __contains__(self, unit: object) -> bool:
        if isinstance(unit, (CalendarUnit, str)):
            try:
                return CalendarUnit.from_name(unit) in self._amounts
            except ValidationError:
                return False
        return False

    def __neg__(self) -> CalendarDelta:
        """Return the delta with every amount negated."""
        return CalendarDelta._from_amounts({unit: -value for unit, value in self._amounts.items()})

    def __pos__(self) -> CalendarDelta:
        return self

    def __add__(self, other: object) -> CalendarDelta:
        """Combine two deltas; units present in either are present in the result."""
        if not isinstance(other, CalendarDelta):
            return NotImplemented
        amounts = dict(self._amounts)
        for unit, value in other._amounts.items():
            amounts[unit] = amounts.get(unit, 0) + value
        return CalendarDelta._from_amounts(amounts)

    def __sub__(self, other: object) -> CalendarDelta:
        if not isinstance(other, CalendarDelta):
            return NotImplemented
        return self + (-other)

    def __mul__(self, other: object) -> CalendarDelta:
        """Scale every amount by an integer.

        Examples:
            >>> CalendarDelta(months=3) * 2
            CalendarDelta(months=6)
        """
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return CalendarDelta._from_amounts({unit: value * other for unit, value in self._amounts.items()})

    def __rmul__(self, other: object) -> CalendarDelta:
        """Support scalar * CalendarDelta."""
        return self.__mul__(other)

    def __eq__(self, other: object) -> bool:
        """Check equality with another delta.

        Deltas are equal when the same units are present with the same
        amounts, so CalendarDelta(days=0) != CalendarDelta() and
        CalendarDelta(months=12) != CalendarDelta(years=1).
        """
        if not isinstance(other, CalendarDelta):
            return NotImplemented
        return self._amounts == other._amounts

    def __hash__(self) -> int:
        return hash(tuple(self._amounts.items()))

    def __repr__(self) -> str:
        parts = ", ".join(f"{unit.value}s={value}" for unit, value in self._amounts.items())
        return f"CalendarDelta({parts})"

    def __str__(self) -> str:
        """Return an ISO 8601 duration-like form such as "P1Y2MT3H".

        Examples:
            >>> str(CalendarDelta(years=1, months=2, hours=3))
            'P1Y2MT3H'
        """
        date_part = "".join(
            f"{value}{code}"
            for code, value in (("Y", self.years), ("M", self.months), ("W", self.weeks), ("D", self.days))
            if value
        )
        time_part = "".join(
            f"{value}{code}"
            for code, value in (("H", self.hours), ("M", self.minutes), ("S", self.seconds))
            if value
        )
        if not date_part and not time_part:
            return "P0D"
        return "P" + date_part + ("T" + time_part if time_part else "")

    def __bool__(self) -> bool:
        """Return True if any present amount is non-zero."""
        return not self.is_zero


__all__ = ["CalendarDelta"]
