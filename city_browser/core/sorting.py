"""
Single- and multi-key sorting over row collections.

Both sorters return a new list and never touch the input. Python's sort is
stable, so rows that compare equal keep their input order; this is the only
tie-breaker the single-key sorter has.
"""
from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Any, Iterable, List, Sequence, TypeVar

from city_browser.core.city import get_field
from city_browser.core.collation import DEFAULT_COLLATOR, Collator
from city_browser.core.comparator import compare_values
from city_browser.core.sort_spec import MultiSortSpec, SortDirection, SortSpec

logger = logging.getLogger(__name__)

T = TypeVar("T")


def sort_data(
    rows: Iterable[T],
    spec: SortSpec,
    *,
    collator: Collator = DEFAULT_COLLATOR,
) -> List[T]:
    """
    Sort rows by one field.

    Direction none returns a copy in the original order.
    """
    if spec.direction is SortDirection.NONE:
        return list(rows)

    key = spec.key
    direction = spec.direction

    def _compare_rows(a: Any, b: Any) -> int:
        return compare_values(get_field(a, key), get_field(b, key), direction, collator)

    result = sorted(rows, key=cmp_to_key(_compare_rows))
    logger.debug(
        "Sorted rows",
        extra={"sort_key": key, "direction": direction.value, "n_rows": len(result)},
    )
    return result


def active_specs(specs: Sequence[MultiSortSpec]) -> List[MultiSortSpec]:
    """Specs that take part in a sort, in the order they are compared."""
    return sorted(
        (s for s in specs if s.direction is not SortDirection.NONE),
        key=lambda s: s.priority,
    )


def sort_data_multi(
    rows: Iterable[T],
    specs: Sequence[MultiSortSpec],
    *,
    collator: Collator = DEFAULT_COLLATOR,
) -> List[T]:
    """
    Sort rows by several fields.

    Specs are compared by ascending priority regardless of list order; the
    first field that differs decides. Inactive specs (direction none) are
    ignored, and with no active spec the rows come back in input order.
    """
    ordered = active_specs(specs)
    if not ordered:
        return list(rows)

    def _compare_rows(a: Any, b: Any) -> int:
        for spec in ordered:
            result = compare_values(
                get_field(a, spec.key), get_field(b, spec.key), spec.direction, collator
            )
            if result:
                return result
        return 0

    result = sorted(rows, key=cmp_to_key(_compare_rows))
    logger.debug(
        "Multi-sorted rows",
        extra={
            "sort_keys": [s.key for s in ordered],
            "directions": [s.direction.value for s in ordered],
            "n_rows": len(result),
        },
    )
    return result
