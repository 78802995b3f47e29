"""
City data source: loads the cities table and answers search queries.

This is the upstream collaborator of the ordering engine. It hands the core
a freshly filtered list of City rows per query; sorting and paging happen
afterwards, on that snapshot.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import pandas as pd

from city_browser.core.city import CITY_FIELDS, City
from city_browser.core.collation import DEFAULT_COLLATOR, PRIMARY, Collator
from city_browser.core.exceptions import DataSourceError, SearchBackendError
from city_browser.validation.dataset_validation import validate_city_frame

logger = logging.getLogger(__name__)

SEARCH_COLUMNS = ("name", "name_ascii", "country")
RESERVED_ERROR_TERM = "error"
SEARCH_FAILURE_MESSAGE = "Something terrible just happened!"
DEFAULT_SEARCH_LIMIT = 10000


@dataclass(frozen=True)
class SearchResult:
    """
    Rows matching a search plus the match count before limit/offset.
    """
    cities: List[City] = field(default_factory=list)
    total_count: int = 0


def _normalise_frame(df: pd.DataFrame) -> pd.DataFrame:
    out = df.loc[:, list(CITY_FIELDS)].copy()
    for col in ("name", "name_ascii", "country", "country_iso3", "capital"):
        out[col] = out[col].fillna("").astype(str)
    out["id"] = out["id"].astype(int)
    # Unknown populations stay missing (pd.NA), they are not zero
    out["population"] = pd.to_numeric(out["population"], errors="coerce").round().astype("Int64")
    return out.reset_index(drop=True)


class CitySource:
    """
    In-memory cities table with case-insensitive substring search over
    name, ASCII name and country.
    """

    def __init__(self, frame: pd.DataFrame, collator: Collator = DEFAULT_COLLATOR) -> None:
        validate_city_frame(frame)
        self._frame = _normalise_frame(frame)
        self._collator = collator

    @classmethod
    def from_frame(cls, frame: pd.DataFrame, collator: Collator = DEFAULT_COLLATOR) -> CitySource:
        return cls(frame, collator=collator)

    @classmethod
    def from_csv(cls, path: Path | str, collator: Collator = DEFAULT_COLLATOR) -> CitySource:
        path = Path(path)
        logger.info("Loading cities table", extra={"data_file": str(path)})
        try:
            frame = pd.read_csv(path)
        except (OSError, ValueError) as e:
            raise DataSourceError(f"Could not load cities from {path}: {e}") from e

        source = cls(frame, collator=collator)
        logger.info("Cities table loaded", extra={"data_file": str(path), "n_cities": len(source)})
        return source

    def __len__(self) -> int:
        return len(self._frame)

    def search(
        self,
        term: Optional[str] = None,
        *,
        limit: int = DEFAULT_SEARCH_LIMIT,
        offset: int = 0,
    ) -> SearchResult:
        """
        Filter cities by a search term.

        An empty or whitespace-only term matches everything. The term
        'error' (any case or accents) simulates a backend failure.

        :raises SearchBackendError: for the reserved failure term.
        """
        if not term or not term.strip():
            filtered = self._frame
        else:
            trimmed = term.strip()

            if self._collator.equals(trimmed, RESERVED_ERROR_TERM, strength=PRIMARY):
                logger.warning("Search backend failure", extra={"search_term": trimmed})
                raise SearchBackendError(SEARCH_FAILURE_MESSAGE)

            mask = pd.Series(False, index=self._frame.index)
            for col in SEARCH_COLUMNS:
                mask |= self._frame[col].str.contains(trimmed, case=False, regex=False, na=False)
            filtered = self._frame[mask]

        total_count = len(filtered)
        window = filtered.iloc[offset: offset + limit]
        cities = [City.from_dict(rec) for rec in window.to_dict("records")]

        logger.info(
            "Search completed",
            extra={"search_term": term or "", "total_count": total_count, "returned": len(cities)},
        )
        return SearchResult(cities=cities, total_count=total_count)
