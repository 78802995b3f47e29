"""
Browser session handling: search -> sort -> paginate -> export.

BrowserService is the caller of the ordering engine. It owns nothing but
configuration; each operation takes a BrowserSession and returns a new one.
Any change of the row set or of the sort puts the session back on page 1.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional

from city_browser.config.model import BrowserConfig
from city_browser.core.city import City
from city_browser.core.collation import DEFAULT_COLLATOR, Collator
from city_browser.core.exceptions import SearchBackendError
from city_browser.core.pagination import (
    PageRequest,
    PageResult,
    get_page_numbers,
    go_to_page,
    paginate,
    total_pages_for,
)
from city_browser.core.sort_state import (
    SortState,
    activate_sort,
    apply_sort,
    clear_sort,
    toggle_multi_sort,
)
from city_browser.export.csv_export import to_csv
from city_browser.export.model import ExportResult
from city_browser.services.city_source import CitySource
from city_browser.services.export_service import ExportService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BrowserSession:
    """
    What the user is currently looking at.

    - search_term: last search submitted
    - cities: rows returned by that search (unsorted snapshot)
    - total_count: matches before the search limit was applied
    - sort_state: active single- or multi-sort
    - current_page: requested page (1-based)
    - error: message of the last failed search, if any
    """
    search_term: str = ""
    cities: List[City] = field(default_factory=list)
    total_count: int = 0
    sort_state: SortState = field(default_factory=SortState)
    current_page: int = 1
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        # Rows are not stored; they are re-fetched from the search term
        return {
            "search_term": self.search_term,
            "sort_state": self.sort_state.to_dict(),
            "current_page": self.current_page,
        }


class BrowserService:
    def __init__(
            self,
            source: CitySource,
            config: BrowserConfig,
            *,
            export_service: Optional[ExportService] = None,
            collator: Collator = DEFAULT_COLLATOR,
    ) -> None:
        self.source = source
        self.config = config
        self.export_service = export_service
        self.collator = collator

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------
    def new_session(self) -> BrowserSession:
        return self.run_search(BrowserSession(), "")

    def session_from_dict(self, data: Optional[Mapping[str, Any]]) -> BrowserSession:
        """Rebuild a session from to_dict() output by re-running its search."""
        if not data:
            return self.new_session()

        session = self.run_search(BrowserSession(), data.get("search_term") or "")
        return replace(
            session,
            sort_state=SortState.from_dict(data.get("sort_state")),
            current_page=int(data.get("current_page") or 1),
        )

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def run_search(self, session: BrowserSession, term: str) -> BrowserSession:
        try:
            result = self.source.search(term, limit=self.config.search_limit, offset=0)
        except SearchBackendError as e:
            logger.warning("Search failed", extra={"search_term": term, "error": str(e)})
            return replace(
                session,
                search_term=term,
                cities=[],
                total_count=0,
                current_page=1,
                error=str(e),
            )

        return replace(
            session,
            search_term=term,
            cities=result.cities,
            total_count=result.total_count,
            current_page=1,
            error=None,
        )

    def activate_sort(self, session: BrowserSession, key: str, *, multi: bool = False) -> BrowserSession:
        if multi:
            sort_state = toggle_multi_sort(session.sort_state, key)
        else:
            sort_state = activate_sort(session.sort_state, key)
        return replace(session, sort_state=sort_state, current_page=1)

    def clear_sort(self, session: BrowserSession) -> BrowserSession:
        return replace(session, sort_state=clear_sort(), current_page=1)

    def change_page(self, session: BrowserSession, page: int) -> BrowserSession:
        total_pages = total_pages_for(len(session.cities), self.config.page_size)
        return replace(session, current_page=go_to_page(page, total_pages))

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------
    def sorted_rows(self, session: BrowserSession) -> List[City]:
        return apply_sort(session.cities, session.sort_state, collator=self.collator)

    def page(self, session: BrowserSession) -> PageResult[City]:
        rows = self.sorted_rows(session)
        return paginate(
            rows,
            PageRequest(
                current_page=session.current_page,
                page_size=self.config.page_size,
                total_items=len(rows),
            ),
        )

    def page_numbers(self, page_result: PageResult[City]) -> List[int]:
        return get_page_numbers(
            page_result.current_page,
            page_result.total_pages,
            self.config.max_visible_pages,
        )

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------
    def export_csv(self, session: BrowserSession) -> str:
        """CSV of every sorted row of the session, not just the current page."""
        return to_csv(self.sorted_rows(session))

    def export_to_storage(
            self,
            session: BrowserSession,
            filename: Optional[str] = None,
    ) -> Optional[ExportResult]:
        if self.export_service is None:
            raise RuntimeError("BrowserService.export_service must be initialized.")
        return self.export_service.write(self.sorted_rows(session), filename)
