from __future__ import annotations

import pandas as pd
import pytest
from dash import dcc

from city_browser.config.model import BrowserConfig
from city_browser.services.browser_service import BrowserService
from city_browser.services.city_source import CitySource
from city_browser.ui.config import AppConfig
from city_browser.ui.ids import IDs
from city_browser.ui.layout import build_layout


def _walk(component):
    yield component
    children = getattr(component, "children", None)
    if children is None or isinstance(children, str):
        return
    if not isinstance(children, (list, tuple)):
        children = [children]
    for child in children:
        yield from _walk(child)


@pytest.fixture()
def ctx(tmp_path):
    source = CitySource.from_frame(
        pd.DataFrame(
            {
                "id": [1],
                "name": ["Tokyo"],
                "name_ascii": ["Tokyo"],
                "country": ["Japan"],
                "country_iso3": ["JPN"],
                "capital": ["primary"],
                "population": [39105000],
            }
        )
    )
    config = BrowserConfig(config_root=tmp_path)
    return AppConfig(browser_config=config, browser_service=BrowserService(source, config))


def test_table_container_shows_loading_state(ctx):
    layout = build_layout(ctx)

    loaders = [c for c in _walk(layout) if isinstance(c, dcc.Loading)]
    assert len(loaders) == 1
    assert loaders[0].children.id == IDs.Display.TABLE_CONTAINER


def test_layout_seeds_session_store(ctx):
    layout = build_layout(ctx)

    stores = [c for c in _walk(layout) if isinstance(c, dcc.Store)]
    assert [s.id for s in stores] == [IDs.Store.BROWSER_SESSION]
    assert stores[0].data["current_page"] == 1
    assert stores[0].data["search_term"] == ""


def test_layout_needs_browser_service(tmp_path):
    with pytest.raises(RuntimeError):
        build_layout(AppConfig(browser_config=BrowserConfig(config_root=tmp_path)))
