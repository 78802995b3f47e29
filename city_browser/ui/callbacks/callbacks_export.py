from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

import dash
from dash import Input, Output, State, dcc, exceptions

from city_browser.core.exceptions import ExportError
from city_browser.export.csv_export import default_export_filename
from city_browser.ui.ids import IDs

if TYPE_CHECKING:
    from city_browser.services.browser_service import BrowserService
    from city_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def prepare_download(
        service: BrowserService,
        session_data: Optional[Mapping[str, Any]],
        filename: Optional[str] = None,
) -> Optional[Dict[str, Any]]:
    """
    Write every sorted row of the session to export storage and build the
    dcc.Download payload for it. None when the search has no rows.
    """
    session = service.session_from_dict(session_data)
    result = service.export_to_storage(session, filename or default_export_filename())
    if result is None:
        return None

    if result.local_path is not None:
        return dcc.send_file(str(result.local_path), filename=result.filename, type="text/csv")

    # Remote backends: stream the stored blob back
    data = service.export_service.storage.read_bytes(result.filename)
    return dcc.send_bytes(data, result.filename, type="text/csv")


def register_export_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    service = ctx.browser_service

    @app.callback(
        Output(IDs.Control.DOWNLOAD_CSV, "data"),
        Input(IDs.Control.EXPORT_BTN, "n_clicks"),
        State(IDs.Store.BROWSER_SESSION, "data"),
        prevent_initial_call=True,
    )
    def download_csv(n_clicks, session_data):
        if not n_clicks:
            raise exceptions.PreventUpdate

        try:
            payload = prepare_download(service, session_data)
        except ExportError:
            logger.exception("CSV download failed")
            raise exceptions.PreventUpdate

        if payload is None:
            raise exceptions.PreventUpdate

        logger.info("CSV download prepared", extra={"export_file": payload["filename"]})
        return payload
