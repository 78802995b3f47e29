from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc

from city_browser.ui.ids import IDs


def build_toolbar() -> dbc.Row:
    return dbc.Row(
        [
            dbc.Col(
                dcc.Input(
                    id=IDs.Control.SEARCH_INPUT,
                    type="search",
                    value="",
                    placeholder="Search cities or countries...",
                    debounce=0.3,
                    className="form-control",
                ),
                md=6,
            ),
            dbc.Col(
                dbc.Switch(
                    id=IDs.Control.MULTI_SORT_SWITCH,
                    label="Multi-sort",
                    value=False,
                ),
                md="auto",
                className="d-flex align-items-center",
            ),
            dbc.Col(
                dbc.Button(
                    "Clear sort",
                    id=IDs.Control.CLEAR_SORT_BTN,
                    n_clicks=0,
                    color="secondary",
                    outline=True,
                ),
                md="auto",
            ),
            dbc.Col(
                [
                    dbc.Button(
                        "📊 Export CSV",
                        id=IDs.Control.EXPORT_BTN,
                        n_clicks=0,
                        color="success",
                    ),
                    dcc.Download(id=IDs.Control.DOWNLOAD_CSV),
                ],
                md="auto",
                className="ms-auto",
            ),
        ],
        className="g-2 mb-3",
    )
