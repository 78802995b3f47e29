from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from city_browser.config.model import BrowserConfig


def build_navbar(config: BrowserConfig) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(config.ui_title, className="mb-0"),
                        html.Small(config.subtitle, className="text-muted"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
            ],
        ),
        color="light",
        className="mb-4",
    )
