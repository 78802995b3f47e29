from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from city_browser.config.io import load_browser_config
from city_browser.services.browser_service import BrowserService
from city_browser.services.city_source import CitySource
from city_browser.services.export_service import ExportService
from city_browser.services.storage import LocalFileSystemStorage
from city_browser.ui.callbacks import register_browser_callbacks, register_export_callbacks
from city_browser.ui.layout import build_layout

logger = logging.getLogger(__name__)


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    browser_config = load_browser_config(config_root)

    # 2) Load Data
    source = CitySource.from_csv(browser_config.data_file)

    # 3) Services
    export_service = ExportService(LocalFileSystemStorage(browser_config.export_root))
    browser_service = BrowserService(source, browser_config, export_service=export_service)

    # 4) App Context
    ctx = AppConfig(browser_config=browser_config, browser_service=browser_service)
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = browser_config.ui_title
    app.layout = build_layout(ctx)

    register_browser_callbacks(app, ctx)
    register_export_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"config_root": str(config_root), "n_cities": len(source)},
    )
    return app
