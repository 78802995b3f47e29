from __future__ import annotations

import base64

import pandas as pd
import pytest

from city_browser.config.model import BrowserConfig
from city_browser.services.browser_service import BrowserService
from city_browser.services.city_source import CitySource
from city_browser.services.export_service import ExportService
from city_browser.services.storage import LocalFileSystemStorage, StorageBackend
from city_browser.ui.callbacks.callbacks_export import prepare_download


class _MemoryStorage(StorageBackend):
    def __init__(self):
        self.blobs = {}

    def write_bytes(self, path: str, data: bytes) -> None:
        self.blobs[path] = data

    def read_bytes(self, path: str) -> bytes:
        return self.blobs[path]


@pytest.fixture()
def source():
    return CitySource.from_frame(
        pd.DataFrame(
            {
                "id": [1, 2],
                "name": ["Tokyo", "Delhi"],
                "name_ascii": ["Tokyo", "Delhi"],
                "country": ["Japan", "India"],
                "country_iso3": ["JPN", "IND"],
                "capital": ["primary", "admin"],
                "population": [39105000, 31870000],
            }
        )
    )


def _decoded(payload) -> str:
    assert payload["base64"] is True
    return base64.b64decode(payload["content"]).decode("utf-8")


def test_download_is_served_from_export_storage(source, tmp_path):
    export_root = tmp_path / "exports"
    service = BrowserService(
        source,
        BrowserConfig(config_root=tmp_path),
        export_service=ExportService(LocalFileSystemStorage(export_root)),
    )
    session = service.activate_sort(service.new_session(), "name")

    payload = prepare_download(service, session.to_dict(), "cities.csv")

    assert payload["filename"] == "cities.csv"
    assert payload["type"] == "text/csv"
    content = _decoded(payload)
    assert content.split("\n")[1].startswith('"Delhi"')
    # The same file is kept in the export directory
    assert (export_root / "cities.csv").read_text(encoding="utf-8") == content


def test_download_from_backend_without_local_path(source, tmp_path):
    storage = _MemoryStorage()
    service = BrowserService(
        source,
        BrowserConfig(config_root=tmp_path),
        export_service=ExportService(storage),
    )

    payload = prepare_download(service, None, "cities.csv")

    assert _decoded(payload).startswith("City Name,Country,Population,Capital Status")
    assert "cities.csv" in storage.blobs


def test_empty_search_has_nothing_to_download(source, tmp_path):
    service = BrowserService(
        source,
        BrowserConfig(config_root=tmp_path),
        export_service=ExportService(LocalFileSystemStorage(tmp_path / "exports")),
    )
    session = service.run_search(service.new_session(), "no such city")

    assert prepare_download(service, session.to_dict()) is None
    assert list((tmp_path / "exports").iterdir()) == []
