from __future__ import annotations

from dash import html

from city_browser.core.city import City
from city_browser.core.pagination import PageRequest, paginate
from city_browser.core.sort_spec import MultiSortSpec, SortSpec
from city_browser.core.sort_state import SortState
from city_browser.ui.helpers import (
    city_table,
    format_population,
    header_cell,
    multi_sort_notice,
    pagination_controls,
    pagination_summary,
    search_limit_notice,
    sort_icon,
)
from city_browser.ui.ids import PAGE_BUTTON_TYPE, SORT_HEADER_TYPE


def _multi_state():
    return SortState(
        multi_sort=(MultiSortSpec("country", "asc", 0), MultiSortSpec("population", "desc", 1))
    )


def test_format_population_uses_thousands_separators():
    assert format_population(39105000) == "39,105,000"
    assert format_population(None) == ""


def test_sort_icons():
    state = SortState(single_sort=SortSpec("name", "asc"))
    assert sort_icon(state, "name") == "↑"
    assert sort_icon(state, "country") == "↕"

    multi = _multi_state()
    assert sort_icon(multi, "country") == "↑1"
    assert sort_icon(multi, "population") == "↓2"


def test_header_cell_is_clickable_and_accessible():
    cell = header_cell(SortState(single_sort=SortSpec("name", "desc")), "name", "City Name")

    assert cell.id == {"type": SORT_HEADER_TYPE, "index": "name"}
    assert cell.n_clicks == 0
    assert cell.tabIndex == 0
    assert getattr(cell, "aria-sort") == "descending"


def test_empty_table_shows_message():
    table = city_table([], SortState())
    assert isinstance(table, html.Div)
    assert "No cities found" in table.children.children


def test_pagination_summary_text():
    rows = list(range(25))
    page = paginate(rows, PageRequest(current_page=2, page_size=10, total_items=25))
    assert pagination_summary(page) == "Showing 11 to 20 of 25 results"


def test_pagination_controls_hidden_without_rows():
    page = paginate([], PageRequest(current_page=1, page_size=10, total_items=0))
    assert pagination_controls(page, []) is None


def test_pagination_buttons_carry_target_pages():
    rows = list(range(25))
    page = paginate(rows, PageRequest(current_page=1, page_size=10, total_items=25))
    nav = pagination_controls(page, [1, 2, 3])

    buttons = nav.children[1].children
    ids = [b.id for b in buttons]
    assert all(i["type"] == PAGE_BUTTON_TYPE for i in ids)
    assert [(i["role"], i["page"]) for i in ids] == [
        ("first", 1),
        ("prev", 1),
        ("number", 1),
        ("number", 2),
        ("number", 3),
        ("next", 2),
        ("last", 3),
    ]
    # First and previous are disabled on page 1
    assert buttons[0].disabled and buttons[1].disabled
    assert not buttons[-1].disabled


def test_multi_sort_notice_only_in_multi_mode():
    assert multi_sort_notice(SortState()) is None
    assert multi_sort_notice(SortState(single_sort=SortSpec("name"))) is None
    assert multi_sort_notice(_multi_state()) is not None


def test_table_renders_capital_labels():
    rows = [City(1, "Houston", "Houston", "United States", "USA", "", 5970127)]
    table = city_table(rows, SortState())
    body = table.children[1]
    cells = body.children[0].children
    assert [c.children for c in cells] == ["Houston", "United States", "5,970,127", "Not a Capital"]


def test_search_limit_notice_only_when_results_are_cut():
    assert search_limit_notice(10, 10) is None
    assert search_limit_notice(0, 0) is None

    notice = search_limit_notice(10000, 12500)
    assert "first 10,000 of 12,500" in notice.children
