from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_DATA_FILE = Path(__file__).resolve().parent.parent / "data" / "worldcities_sample.csv"


@dataclass
class BrowserConfig:
    """
    Parsed global.json for the browser.

    - ui_title / subtitle: navbar text
    - page_size: rows per table page
    - max_visible_pages: numbered page buttons shown at once
    - search_limit: most rows a single search may return
    - data_file: cities CSV (relative paths resolve against the config root)
    - export_root: directory CSV exports are written to
    """
    config_root: Path
    ui_title: str = "World Cities Database"
    subtitle: str = "Explore and search through major cities worldwide"
    page_size: int = 10
    max_visible_pages: int = 5
    search_limit: int = 10000
    data_file: Path = DEFAULT_DATA_FILE
    export_root: Path = field(default=Path("exports"))
