from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Tuple

from city_browser.core.comparator import is_missing

# Capital codes as they appear in the source dataset
CAPITAL_PRIMARY = "primary"
CAPITAL_ADMIN = "admin"
CAPITAL_MINOR = "minor"

CAPITAL_STATUS_LABELS: Dict[str, str] = {
    CAPITAL_PRIMARY: "Primary Capital",
    CAPITAL_ADMIN: "Administrative Capital",
    CAPITAL_MINOR: "Minor Capital",
}
NOT_A_CAPITAL = "Not a Capital"


def format_capital_status(capital: Any) -> str:
    """
    Human-readable label for a capital code.

    Shared by the table renderer and the CSV exporter so both always agree.
    Empty, missing and unknown codes all read as 'Not a Capital'.
    """
    if not isinstance(capital, str):
        return NOT_A_CAPITAL
    return CAPITAL_STATUS_LABELS.get(capital, NOT_A_CAPITAL)


def _optional_int(value: Any) -> Optional[int]:
    return None if is_missing(value) else int(value)


@dataclass(frozen=True)
class City:
    """
    One row of the world-cities dataset.

    Fields:

    - id: unique numeric identifier
    - name: display name (may contain non-ASCII characters)
    - name_ascii: ASCII-normalised name, used for searching
    - country: country name
    - country_iso3: ISO 3166-1 alpha-3 country code
    - capital: 'primary', 'admin', 'minor' or '' when not a capital
    - population: non-negative head count, None when unknown
    """
    id: int
    name: str
    name_ascii: str
    country: str
    country_iso3: str
    capital: str
    population: Optional[int]

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> City:
        return cls(
            id=int(data["id"]),
            name=str(data.get("name", "")),
            name_ascii=str(data.get("name_ascii", "")),
            country=str(data.get("country", "")),
            country_iso3=str(data.get("country_iso3", "")),
            capital=data.get("capital") or "",
            population=_optional_int(data.get("population")),
        )


CITY_FIELDS: Tuple[str, ...] = tuple(f.name for f in fields(City))


def get_field(row: Any, key: str) -> Any:
    """
    Read a named field from a row.

    Rows are either mappings or attribute-style records (e.g. City).
    A field the row does not carry reads as None.
    """
    if isinstance(row, Mapping):
        return row.get(key)
    return getattr(row, key, None)
