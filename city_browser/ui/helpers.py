from __future__ import annotations

from typing import Any, List, Sequence, Tuple

import dash_bootstrap_components as dbc
from dash import html

from city_browser.core.city import format_capital_status, get_field
from city_browser.core.comparator import is_missing
from city_browser.core.pagination import (
    PageResult,
    go_to_first_page,
    go_to_last_page,
    go_to_next_page,
    go_to_previous_page,
)
from city_browser.core.sort_spec import SortDirection, aria_sort_value
from city_browser.core.sort_state import SortState
from city_browser.ui.ids import page_button_id, sort_header_id

TABLE_COLUMNS: Tuple[Tuple[str, str], ...] = (
    ("name", "City Name"),
    ("country", "Country"),
    ("population", "Population"),
    ("capital", "Capital Status"),
)

SORT_ICONS = {
    SortDirection.ASC: "↑",
    SortDirection.DESC: "↓",
    SortDirection.NONE: "↕",
}


def format_population(value: Any) -> str:
    if is_missing(value):
        return ""
    return f"{int(value):,}"


def sort_icon(state: SortState, key: str) -> str:
    icon = SORT_ICONS[state.direction_for(key)]
    priority = state.priority_for(key)
    # Multi-sort headers also show their precedence
    return f"{icon}{priority}" if priority is not None else icon


def header_cell(state: SortState, key: str, label: str) -> html.Th:
    return html.Th(
        [html.Span(label), html.Span(sort_icon(state, key), className="sort-icon ms-1")],
        id=sort_header_id(key),
        n_clicks=0,
        role="columnheader",
        tabIndex=0,
        className="sortable-header",
        **{"aria-sort": aria_sort_value(state.direction_for(key))},
    )


def _cell(row: Any, key: str) -> html.Td:
    value = get_field(row, key)
    if key == "population":
        return html.Td(format_population(value), className="text-end")
    if key == "capital":
        return html.Td(format_capital_status(value), className="capital-cell")
    return html.Td("" if is_missing(value) else str(value))


def city_table(rows: Sequence[Any], state: SortState):
    if not rows:
        return html.Div(
            html.P("No cities found matching your search criteria."),
            role="status",
            className="empty-state",
        )

    head = html.Thead(html.Tr([header_cell(state, key, label) for key, label in TABLE_COLUMNS]))
    body = html.Tbody([html.Tr([_cell(row, key) for key, _ in TABLE_COLUMNS]) for row in rows])

    return dbc.Table(
        [head, body],
        hover=True,
        striped=True,
        responsive=True,
        className="city-table",
    )


def pagination_summary(page: PageResult) -> str:
    return f"Showing {page.start_index} to {page.end_index} of {page.total_items:,} results"


def _nav_button(label: str, role: str, target: int, disabled: bool) -> dbc.Button:
    return dbc.Button(
        label,
        id=page_button_id(role, target),
        n_clicks=0,
        disabled=disabled,
        color="secondary",
        outline=True,
        size="sm",
        className="me-1",
    )


def pagination_controls(page: PageResult, page_numbers: List[int]):
    if page.total_items == 0:
        return None

    current = page.current_page
    total = page.total_pages
    on_first = current == 1
    on_last = current == total

    buttons = [
        _nav_button("⏮ First", "first", go_to_first_page(), on_first),
        _nav_button("◀ Previous", "prev", go_to_previous_page(current), on_first),
    ]
    for number in page_numbers:
        buttons.append(
            dbc.Button(
                str(number),
                id=page_button_id("number", number),
                n_clicks=0,
                color="primary",
                outline=number != current,
                size="sm",
                className="me-1",
            )
        )
    buttons += [
        _nav_button("Next ▶", "next", go_to_next_page(current, total), on_last),
        _nav_button("Last ⏭", "last", go_to_last_page(total), on_last),
    ]

    return html.Nav(
        [
            html.Div(pagination_summary(page), className="pagination-info text-muted mb-2"),
            html.Div(buttons, className="pagination-controls"),
            html.Small(f"Page {current} of {total}", className="text-muted"),
        ],
        role="navigation",
        className="mt-3",
        **{"aria-label": "Pagination navigation"},
    )


def multi_sort_notice(state: SortState):
    if not state.is_multi:
        return None
    n = len(state.active_specs())
    plural = "s" if n != 1 else ""
    return dbc.Alert(
        [
            html.Strong("Multi-sort active: "),
            f"{n} column{plural} sorted. Click column headers to modify sort direction.",
        ],
        color="info",
        className="py-2",
    )


def search_limit_notice(shown: int, total: int):
    """Warns when a search matched more cities than it returned."""
    if total <= shown:
        return None
    return dbc.Alert(
        f"Showing the first {shown:,} of {total:,} matching cities. "
        "Refine your search to see the rest.",
        color="warning",
        className="py-2",
    )
