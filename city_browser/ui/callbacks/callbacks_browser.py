from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import ALL, Input, Output, State, exceptions

from city_browser.core.sort_state import SortState
from city_browser.services.browser_service import BrowserSession
from city_browser.ui.helpers import (
    city_table,
    multi_sort_notice,
    pagination_controls,
    search_limit_notice,
)
from city_browser.ui.ids import IDs, PAGE_BUTTON_TYPE, SORT_HEADER_TYPE

if TYPE_CHECKING:
    from city_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def _require_click() -> None:
    """
    Re-rendered headers and page buttons enter the layout with n_clicks=0,
    which still triggers pattern-matching callbacks. Only real clicks count.
    """
    if not any(t.get("value") for t in dash.ctx.triggered):
        raise exceptions.PreventUpdate


def register_browser_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    service = ctx.browser_service

    # ---------------------------------------------------------
    # 1. Search (new row set, sort kept, back to page 1)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.BROWSER_SESSION, "data", allow_duplicate=True),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        State(IDs.Store.BROWSER_SESSION, "data"),
        prevent_initial_call=True,
    )
    def run_search(term, session_data):
        sort_state = SortState.from_dict((session_data or {}).get("sort_state"))
        session = service.run_search(BrowserSession(sort_state=sort_state), term or "")
        return session.to_dict()

    # ---------------------------------------------------------
    # 2. Column header activation (plain or multi-sort gesture)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.BROWSER_SESSION, "data", allow_duplicate=True),
        Input({"type": SORT_HEADER_TYPE, "index": ALL}, "n_clicks"),
        State(IDs.Control.MULTI_SORT_SWITCH, "value"),
        State(IDs.Store.BROWSER_SESSION, "data"),
        prevent_initial_call=True,
    )
    def sort_by_column(_n_clicks, multi, session_data):
        _require_click()
        key = dash.ctx.triggered_id["index"]

        session = service.session_from_dict(session_data)
        session = service.activate_sort(session, key, multi=bool(multi))
        return session.to_dict()

    @app.callback(
        Output(IDs.Store.BROWSER_SESSION, "data", allow_duplicate=True),
        Input(IDs.Control.CLEAR_SORT_BTN, "n_clicks"),
        State(IDs.Store.BROWSER_SESSION, "data"),
        prevent_initial_call=True,
    )
    def clear_sort(n_clicks, session_data):
        if not n_clicks:
            raise exceptions.PreventUpdate
        session = service.clear_sort(service.session_from_dict(session_data))
        return session.to_dict()

    # ---------------------------------------------------------
    # 3. Pagination
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.BROWSER_SESSION, "data", allow_duplicate=True),
        Input({"type": PAGE_BUTTON_TYPE, "role": ALL, "page": ALL}, "n_clicks"),
        State(IDs.Store.BROWSER_SESSION, "data"),
        prevent_initial_call=True,
    )
    def change_page(_n_clicks, session_data):
        _require_click()
        page = dash.ctx.triggered_id["page"]

        session = service.change_page(service.session_from_dict(session_data), page)
        return session.to_dict()

    # ---------------------------------------------------------
    # 4. Render table, pagination and banners from the session
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Display.TABLE_CONTAINER, "children"),
        Output(IDs.Display.PAGINATION_CONTAINER, "children"),
        Output(IDs.Display.MULTI_SORT_NOTICE, "children"),
        Output(IDs.Display.SEARCH_LIMIT_NOTICE, "children"),
        Output(IDs.Display.ERROR_BANNER, "children"),
        Output(IDs.Display.ERROR_BANNER, "is_open"),
        Output(IDs.Control.EXPORT_BTN, "disabled"),
        Input(IDs.Store.BROWSER_SESSION, "data"),
    )
    def render_session(session_data):
        session = service.session_from_dict(session_data)

        if session.error:
            return None, None, None, None, f"Error: {session.error}", True, True

        page = service.page(session)
        return (
            city_table(page.data, session.sort_state),
            pagination_controls(page, service.page_numbers(page)),
            multi_sort_notice(session.sort_state),
            search_limit_notice(len(session.cities), session.total_count),
            None,
            False,
            page.total_items == 0,
        )
