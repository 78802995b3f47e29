from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Optional, Tuple


class ColumnKind(Enum):
    TEXT = auto()
    NUMBER = auto()
    CAPITAL = auto()


@dataclass(frozen=True)
class ExportColumn:
    """
    One column of the CSV export.

    - header: text written in the header line
    - key: row field the cell is read from
    - kind: how the cell is formatted (quoted text, bare integer, capital label)
    """
    header: str
    key: str
    kind: ColumnKind = ColumnKind.TEXT


CITY_EXPORT_COLUMNS: Tuple[ExportColumn, ...] = (
    ExportColumn("City Name", "name"),
    ExportColumn("Country", "country"),
    ExportColumn("Population", "population", ColumnKind.NUMBER),
    ExportColumn("Capital Status", "capital", ColumnKind.CAPITAL),
)


@dataclass(frozen=True)
class ExportResult:
    """
    A written export as seen by callers
    """
    filename: str
    content: str
    n_rows: int
    local_path: Optional[Path] = None
