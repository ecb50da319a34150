"""Validation utilities for Datewise.

This module provides validation decorators and utilities for
ensuring calendar values are within valid ranges.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, TypeVar, ParamSpec

from datewise.errors import InvalidFieldCombination, ValidationError

P = ParamSpec("P")
T = TypeVar("T")


def validate_range(
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within specified ranges.

    This decorator validates named parameters against specified (min, max)
    ranges, raising ValidationError if any value is out of range. Parameters
    left at their default are validated too.

    Args:
        **limits: Mapping of parameter names to (min, max) tuples.
                  Both min and max are inclusive.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(max_units=(1, 7))
        ... def describe(max_units: int = 1) -> None:
        ...     pass

        >>> describe(max_units=0)  # Raises ValidationError
        Traceback (most recent call last):
        ...
        ValidationError: max_units must be between 1 and 7, got 0
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()

            for param_name, (min_val, max_val) in limits.items():
                value = bound.arguments.get(param_name)
                if value is not None and (value < min_val or value > max_val):
                    raise ValidationError(
                        f"{param_name} must be between {min_val} and {max_val}, "
                        f"got {value}"
                    )

            return func(*args, **kwargs)

        return wrapper

    return decorator


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Args:
        month: The month to validate.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")


def validate_fields(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    millisecond: int,
) -> None:
    """Validate that calendar fields need no carry to be a real wall time.

    Raises:
        InvalidFieldCombination: If any field is outside its natural range,
            including a day past the end of its month.
    """
    from datewise._internal.calendar import days_in_month

    if month < 1 or month > 12:
        raise InvalidFieldCombination(f"month must be between 1 and 12, got {month}")

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise InvalidFieldCombination(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )

    for name, value, upper in (
        ("hour", hour, 23),
        ("minute", minute, 59),
        ("second", second, 59),
        ("millisecond", millisecond, 999),
    ):
        if value < 0 or value > upper:
            raise InvalidFieldCombination(
                f"{name} must be between 0 and {upper}, got {value}"
            )


__all__ = [
    "validate_range",
    "validate_month",
    "validate_fields",
]
