from __future__ import annotations

import math
from decimal import Decimal

import numpy as np
import pandas as pd
import pytest

from city_browser.core.comparator import compare_values, is_missing
from city_browser.core.sort_spec import SortDirection


def test_numbers_compare_numerically():
    assert compare_values(1, 2, "asc") == -1
    assert compare_values(2, 1, "asc") == 1
    assert compare_values(3, 3, "asc") == 0
    # Not lexicographic
    assert compare_values(9, 10, "asc") == -1


def test_mixed_numeric_types_compare_as_numbers():
    assert compare_values(1.5, 2, "asc") == -1
    assert compare_values(Decimal("2.5"), 2, "asc") == 1
    assert compare_values(np.int64(5), 4.0, "asc") == 1


def test_strings_compare_case_insensitively():
    assert compare_values("apple", "Banana", "asc") == -1
    assert compare_values("Zürich", "amsterdam", "asc") == 1
    assert compare_values("ABC", "abc", "asc") == 0


def test_accented_letters_sort_next_to_base_letter():
    # 'São Paulo' belongs between 'Mumbai' and 'Shanghai'
    assert compare_values("São Paulo", "Mumbai", "asc") == 1
    assert compare_values("São Paulo", "Shanghai", "asc") == -1
    assert compare_values("Zürich", "Zurich", "asc") != 0


def test_desc_negates_asc():
    pairs = [(1, 2), ("a", "B"), (None, 3), (5, 5), ("x", None)]
    for a, b in pairs:
        assert compare_values(a, b, "desc") == -compare_values(a, b, "asc")


def test_missing_values_are_smallest():
    assert compare_values(None, 1, SortDirection.ASC) == -1
    assert compare_values(1, None, SortDirection.ASC) == 1
    assert compare_values(None, 1, SortDirection.DESC) == 1
    assert compare_values(None, None, SortDirection.ASC) == 0
    assert compare_values(float("nan"), None, SortDirection.DESC) == 0


def test_pandas_missing_markers_count_as_missing():
    for value in (None, float("nan"), math.nan, np.nan, pd.NA, pd.NaT):
        assert is_missing(value)
    for value in ("", 0, "nan", False, [None]):
        assert not is_missing(value)


def test_mismatched_types_fall_back_to_string_form():
    # "10" vs 9 -> "10" < "9" as text
    assert compare_values("10", 9, "asc") == -1
    assert compare_values(True, "apple", "asc") == 1


def test_booleans_are_not_numbers():
    # "True" vs "10" as text, so True sorts after 10
    assert compare_values(True, 10, "asc") == 1


def test_none_direction_is_rejected():
    with pytest.raises(ValueError):
        compare_values(1, 2, SortDirection.NONE)


def test_unknown_direction_is_rejected():
    with pytest.raises(ValueError):
        compare_values(1, 2, "sideways")
