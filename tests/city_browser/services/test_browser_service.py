from __future__ import annotations

import pandas as pd
import pytest

from city_browser.config.model import BrowserConfig
from city_browser.core.sort_spec import SortDirection
from city_browser.services.browser_service import BrowserService
from city_browser.services.city_source import SEARCH_FAILURE_MESSAGE, CitySource
from city_browser.services.export_service import ExportService
from city_browser.services.storage import LocalFileSystemStorage


@pytest.fixture()
def source():
    n = 12
    return CitySource.from_frame(
        pd.DataFrame(
            {
                "id": list(range(1, n + 1)),
                "name": [f"City {chr(ord('A') + i)}" for i in range(n)],
                "name_ascii": [f"City {chr(ord('A') + i)}" for i in range(n)],
                "country": ["Japan" if i % 2 else "Brazil" for i in range(n)],
                "country_iso3": ["JPN" if i % 2 else "BRA" for i in range(n)],
                "capital": ["" for _ in range(n)],
                "population": [(i * 7) % 5 * 1000 + i for i in range(n)],
            }
        )
    )


@pytest.fixture()
def service(source, tmp_path):
    config = BrowserConfig(config_root=tmp_path, page_size=5, max_visible_pages=3)
    export_service = ExportService(LocalFileSystemStorage(tmp_path / "exports"))
    return BrowserService(source, config, export_service=export_service)


def test_new_session_shows_first_page(service):
    session = service.new_session()
    page = service.page(session)

    assert session.total_count == 12
    assert page.current_page == 1
    assert page.total_pages == 3
    assert [c.id for c in page.data] == [1, 2, 3, 4, 5]


def test_change_page_is_clamped(service):
    session = service.change_page(service.new_session(), 50)
    assert session.current_page == 3
    assert len(service.page(session).data) == 2


def test_sort_resets_to_first_page(service):
    session = service.change_page(service.new_session(), 2)
    session = service.activate_sort(session, "population")

    assert session.current_page == 1
    populations = [c.population for c in service.sorted_rows(session)]
    assert populations == sorted(populations)


def test_search_resets_page_but_keeps_sort(service):
    session = service.activate_sort(service.new_session(), "name")
    session = service.activate_sort(session, "name")
    session = service.change_page(session, 2)

    session = service.run_search(session, "city")

    assert session.current_page == 1
    assert session.sort_state.direction_for("name") is SortDirection.DESC
    assert service.page(session).data[0].name == "City L"


def test_multi_gesture_builds_multi_sort(service):
    session = service.activate_sort(service.new_session(), "country")
    session = service.activate_sort(session, "population", multi=True)

    assert session.sort_state.is_multi
    rows = service.sorted_rows(session)
    assert [c.country for c in rows[:6]] == ["Brazil"] * 6
    brazil = [c.population for c in rows[:6]]
    assert brazil == sorted(brazil)


def test_clear_sort_restores_search_order(service):
    session = service.activate_sort(service.new_session(), "population")
    session = service.clear_sort(session)
    assert [c.id for c in service.sorted_rows(session)] == list(range(1, 13))


def test_failed_search_sets_error_and_empties_rows(service):
    session = service.run_search(service.new_session(), "error")

    assert session.error == SEARCH_FAILURE_MESSAGE
    assert session.cities == []
    assert service.page(session).total_items == 0

    recovered = service.run_search(session, "")
    assert recovered.error is None
    assert recovered.total_count == 12


def test_session_round_trips_through_dict(service):
    session = service.run_search(service.new_session(), "Japan")
    session = service.activate_sort(session, "population")
    session = service.activate_sort(session, "population")
    session = service.change_page(session, 2)

    restored = service.session_from_dict(session.to_dict())

    assert restored.search_term == "Japan"
    assert restored.sort_state == session.sort_state
    assert restored.current_page == 2
    assert restored.cities == session.cities


def test_session_from_empty_dict_is_new_session(service):
    assert service.session_from_dict(None) == service.new_session()


def test_page_numbers_window(service):
    page = service.page(service.change_page(service.new_session(), 3))
    assert service.page_numbers(page) == [1, 2, 3]


def test_export_csv_covers_all_sorted_rows(service):
    session = service.activate_sort(service.new_session(), "name")
    session = service.activate_sort(session, "name")

    lines = service.export_csv(session).split("\n")

    assert len(lines) == 13
    assert lines[1].startswith('"City L"')


def test_export_of_empty_search_is_empty(service):
    session = service.run_search(service.new_session(), "no such city")
    assert service.export_csv(session) == ""
    assert service.export_to_storage(session, "empty.csv") is None


def test_export_to_storage_writes_file(service, tmp_path):
    result = service.export_to_storage(service.new_session(), "all.csv")
    assert result.n_rows == 12
    assert (tmp_path / "exports" / "all.csv").is_file()


def test_export_to_storage_needs_export_service(source, tmp_path):
    service = BrowserService(source, BrowserConfig(config_root=tmp_path))
    with pytest.raises(RuntimeError):
        service.export_to_storage(service.new_session())


def test_search_limit_keeps_total_count(source, tmp_path):
    service = BrowserService(source, BrowserConfig(config_root=tmp_path, search_limit=5))
    session = service.new_session()

    assert len(session.cities) == 5
    assert session.total_count == 12
    assert service.page(session).total_items == 5
