from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from city_browser.ui.config import AppConfig
from city_browser.ui.ids import IDs
from city_browser.ui.layout.build_navbar import build_navbar
from city_browser.ui.layout.build_toolbar import build_toolbar


def build_layout(ctx: AppConfig):
    ctx.validate()
    initial_session = ctx.browser_service.new_session()

    return dbc.Container(
        fluid=True,
        className="cb-root",
        children=[
            build_navbar(ctx.browser_config),

            # Serialised BrowserSession (search term, sort state, page)
            dcc.Store(
                id=IDs.Store.BROWSER_SESSION,
                data=initial_session.to_dict(),
                storage_type="session",
            ),

            build_toolbar(),

            dbc.Alert(id=IDs.Display.ERROR_BANNER, color="danger", is_open=False),
            html.Div(id=IDs.Display.SEARCH_LIMIT_NOTICE),
            html.Div(id=IDs.Display.MULTI_SORT_NOTICE),
            dcc.Loading(
                html.Div(id=IDs.Display.TABLE_CONTAINER),
                id=IDs.Display.TABLE_LOADING,
                type="default",
            ),
            html.Div(id=IDs.Display.PAGINATION_CONTAINER),

            html.Div(
                html.Small(
                    "Tip: turn on Multi-sort, then click column headers to sort by several columns.",
                    className="text-muted",
                ),
                className="mt-4 text-center",
            ),
        ],
    )
