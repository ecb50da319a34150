"""Decorators shared by the Datewise modules.

Only ``@superseded_by`` lives here for now. It wraps the day-number week
helpers that predate ``start_of_week``/``end_of_week``.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import logging
import warnings
from typing import Callable, TypeVar, ParamSpec

P = ParamSpec("P")
T = TypeVar("T")

logger = logging.getLogger(__name__)


def superseded_by(replacement: str) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Flag a function as superseded by another call.

    Each call emits a DeprecationWarning naming ``replacement``, pointed
    at the caller's frame. The replacement is also appended to the
    wrapped function's docstring and kept on ``__superseded_by__``.

    Args:
        replacement: The expression callers should use instead, for
            example ``"start_of_week(instant).fields().day"``.

    Returns:
        A decorator.
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        note = f"{func.__qualname__}() is superseded by {replacement}"

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            logger.debug("Deprecated call: %s", func.__qualname__)
            warnings.warn(note, DeprecationWarning, stacklevel=2)
            return func(*args, **kwargs)

        doc = (func.__doc__ or "").rstrip()
        wrapper.__doc__ = f"{doc}\n\n.. deprecated:: use {replacement}\n".lstrip()
        wrapper.__superseded_by__ = replacement  # type: ignore[attr-defined]
        return wrapper

    return decorator


__all__ = [
    "superseded_by",
]
