"""
Sort state and the transitions driven by column activations.

The state is either a single sort, a multi-sort over two or more keys, or
nothing. The two modes never coexist, and a multi-sort left with one key
falls back to a single sort.

Transitions:

- activate_sort(): plain column activation. Cycles the single-sorted column
  asc -> desc -> none; any other column replaces the whole sort with (key, asc).
- toggle_multi_sort(): the modifier gesture. Promotes a single sort to a
  multi-sort, appends new keys at the lowest precedence and cycles existing
  ones asc -> desc -> removed.

All transitions are pure: they return a new SortState.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, TypeVar

from city_browser.core.collation import DEFAULT_COLLATOR, Collator
from city_browser.core.sort_spec import (
    MultiSortSpec,
    SortDirection,
    SortSpec,
    toggle_sort_direction,
)
from city_browser.core.sorting import active_specs, sort_data, sort_data_multi

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class SortState:
    """
    Current sort of the browser table.

    - single_sort: the single-column sort, or None
    - multi_sort: multi-column specs; non-empty only when single_sort is None
    """
    single_sort: Optional[SortSpec] = None
    multi_sort: Tuple[MultiSortSpec, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "multi_sort", tuple(self.multi_sort))
        if self.single_sort is not None and self.multi_sort:
            raise ValueError("SortState cannot hold a single sort and a multi-sort at once")

    @property
    def is_multi(self) -> bool:
        return bool(self.multi_sort)

    @property
    def is_sorted(self) -> bool:
        return bool(self.active_specs())

    def active_specs(self) -> List[MultiSortSpec]:
        """Specs to compare with, in precedence order (a single sort is one spec)."""
        if self.multi_sort:
            return active_specs(self.multi_sort)
        if self.single_sort is not None and self.single_sort.direction is not SortDirection.NONE:
            return [MultiSortSpec(self.single_sort.key, self.single_sort.direction, 0)]
        return []

    def direction_for(self, key: str) -> SortDirection:
        for spec in self.active_specs():
            if spec.key == key:
                return spec.direction
        return SortDirection.NONE

    def priority_for(self, key: str) -> Optional[int]:
        """1-based position of `key` in a multi-sort, None otherwise."""
        if not self.multi_sort:
            return None
        for position, spec in enumerate(self.active_specs(), start=1):
            if spec.key == key:
                return position
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "single_sort": self.single_sort.to_dict() if self.single_sort else None,
            "multi_sort": [s.to_dict() for s in self.multi_sort],
        }

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> SortState:
        """
        Rebuild a state from to_dict() output.

        Multi-sort entries are normalised: inactive ones are dropped,
        priorities renumbered from 0, and fewer than two keys fall back to a
        single sort (or none).
        """
        if not data:
            return cls()
        single = data.get("single_sort")
        single_sort = SortSpec.from_dict(single) if single else None
        multi_sort = [MultiSortSpec.from_dict(s) for s in data.get("multi_sort") or []]

        if not multi_sort:
            if single_sort is not None and single_sort.direction is SortDirection.NONE:
                return cls()
            return cls(single_sort=single_sort)
        if single_sort is not None:
            raise ValueError("SortState cannot hold a single sort and a multi-sort at once")
        return _from_specs(_resequence(active_specs(multi_sort)))


def clear_sort() -> SortState:
    return SortState()


def _from_specs(specs: Sequence[MultiSortSpec]) -> SortState:
    if not specs:
        return SortState()
    if len(specs) == 1:
        return SortState(single_sort=SortSpec(specs[0].key, specs[0].direction))
    return SortState(multi_sort=tuple(specs))


def _resequence(specs: Iterable[MultiSortSpec]) -> List[MultiSortSpec]:
    ordered = sorted(specs, key=lambda s: s.priority)
    return [replace(spec, priority=i) for i, spec in enumerate(ordered)]


def activate_sort(state: SortState, key: str) -> SortState:
    single = state.single_sort
    if single is not None and single.key == key:
        direction = toggle_sort_direction(single.direction)
        if direction is SortDirection.NONE:
            new_state = SortState()
        else:
            new_state = SortState(single_sort=SortSpec(key, direction))
    else:
        new_state = SortState(single_sort=SortSpec(key, SortDirection.ASC))

    logger.debug("Sort activated", extra={"sort_key": key, "state": new_state.to_dict()})
    return new_state


def toggle_multi_sort(state: SortState, key: str) -> SortState:
    if not state.multi_sort:
        single = state.single_sort
        if single is None or single.direction is SortDirection.NONE or single.key == key:
            return activate_sort(state, key)
        new_state = SortState(
            multi_sort=(
                MultiSortSpec(single.key, single.direction, 0),
                MultiSortSpec(key, SortDirection.ASC, 1),
            )
        )
        logger.debug("Promoted to multi-sort", extra={"sort_key": key, "state": new_state.to_dict()})
        return new_state

    existing = next((s for s in state.multi_sort if s.key == key), None)

    if existing is None:
        next_priority = max(s.priority for s in state.multi_sort) + 1
        new_state = SortState(
            multi_sort=state.multi_sort + (MultiSortSpec(key, SortDirection.ASC, next_priority),)
        )
    else:
        direction = toggle_sort_direction(existing.direction)
        if direction is SortDirection.NONE:
            remaining = _resequence(s for s in state.multi_sort if s.key != key)
            new_state = _from_specs(remaining)
        else:
            new_state = SortState(
                multi_sort=tuple(
                    replace(s, direction=direction) if s.key == key else s
                    for s in state.multi_sort
                )
            )

    logger.debug("Multi-sort toggled", extra={"sort_key": key, "state": new_state.to_dict()})
    return new_state


def apply_sort(
    rows: Iterable[T],
    state: SortState,
    *,
    collator: Collator = DEFAULT_COLLATOR,
) -> List[T]:
    """Sort rows with whichever mode the state is in; unsorted state keeps input order."""
    if state.multi_sort:
        return sort_data_multi(rows, state.multi_sort, collator=collator)
    if state.single_sort is not None:
        return sort_data(rows, state.single_sort, collator=collator)
    return list(rows)
