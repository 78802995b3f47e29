"""
Core domain layer: city records, the ordering engine (comparator, sorters,
sort-state machine) and the paginator
"""

from .city import City, format_capital_status, get_field
from .collation import Collator, DEFAULT_COLLATOR
from .comparator import compare_values
from .pagination import PageRequest, PageResult, get_page_numbers, paginate
from .sort_spec import MultiSortSpec, SortDirection, SortSpec, toggle_sort_direction
from .sort_state import SortState, activate_sort, apply_sort, toggle_multi_sort
from .sorting import sort_data, sort_data_multi

__all__ = [
    "City",
    "Collator",
    "DEFAULT_COLLATOR",
    "MultiSortSpec",
    "PageRequest",
    "PageResult",
    "SortDirection",
    "SortSpec",
    "SortState",
    "activate_sort",
    "apply_sort",
    "compare_values",
    "format_capital_status",
    "get_field",
    "get_page_numbers",
    "paginate",
    "sort_data",
    "sort_data_multi",
    "toggle_multi_sort",
    "toggle_sort_direction",
]
