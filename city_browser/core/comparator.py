"""
Type-aware, null-safe, direction-aware comparison of two field values.

Rules, applied in order:

1. both values missing -> equal
2. one value missing -> the missing one is smallest (first ascending, last descending)
3. both strings -> case-insensitive, locale-aware collation
4. both numbers -> numeric order
5. anything else -> compare the lowercase string forms as in rule 3

Missing means None, NaN, pandas.NA or pandas.NaT. Booleans are not numbers here.
"""
from __future__ import annotations

import numbers
from decimal import Decimal
from typing import Any

import pandas as pd
from pandas.api.types import is_scalar

from city_browser.core.collation import DEFAULT_COLLATOR, Collator
from city_browser.core.sort_spec import SortDirection


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return False
    if isinstance(value, float):
        return value != value
    return is_scalar(value) and bool(pd.isna(value))


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (numbers.Real, Decimal))


def _sign(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def compare_ascending(a: Any, b: Any, collator: Collator = DEFAULT_COLLATOR) -> int:
    a_missing = is_missing(a)
    b_missing = is_missing(b)
    if a_missing and b_missing:
        return 0
    if a_missing:
        return -1
    if b_missing:
        return 1

    if isinstance(a, str) and isinstance(b, str):
        return collator.compare(a, b)

    if _is_number(a) and _is_number(b):
        return int(_sign(a, b))

    return collator.compare(str(a).lower(), str(b).lower())


def compare_values(
    a: Any,
    b: Any,
    direction: SortDirection | str,
    collator: Collator = DEFAULT_COLLATOR,
) -> int:
    """
    Compare two values for sorting, returning -1, 0 or 1.

    `direction` must be asc or desc; callers treat none as "keep input order"
    and never reach this function with it.
    """
    direction = SortDirection(direction)
    if direction is SortDirection.NONE:
        raise ValueError("compare_values() needs an active direction (asc or desc)")

    result = compare_ascending(a, b, collator)
    return result if direction is SortDirection.ASC else -result
