from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from city_browser.config.model import DEFAULT_DATA_FILE, BrowserConfig
from city_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def _resolve(root: Path, raw: Optional[str], default: Path) -> Path:
    # Absolute paths are used as-is, relative ones hang off the config root
    if not raw:
        return default
    path = Path(raw)
    if path.is_absolute():
        return path
    return (root / path).resolve()


def _positive_int(raw_global: Dict[str, Any], key: str, default: int) -> int:
    value = raw_global.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigError(f"'{key}' must be a positive integer, got {value!r}")
    return value


def load_browser_config(root: Path) -> BrowserConfig:
    """
    Load configuration from a config directory.

    Expected structure:

        root/
            global.json

    global.json is optional; every key falls back to a default:

    - ui_title: title for UI, defaults to 'World Cities Database'
    - page_size: rows per page, defaults to 10
    - max_visible_pages: numbered page buttons, defaults to 5
    - search_limit: row cap per search, defaults to 10000
    - data_file: cities CSV, defaults to the bundled sample dataset
    - export_root: export directory, defaults to 'root/exports'

    :param root: Directory containing 'global.json'.
    :return: A BrowserConfig instance.
    :raises ConfigError: if global.json is not valid JSON or holds invalid values.
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    if not global_path.is_file():
        logger.warning(f"global.json not found at {global_path}, using defaults")
        raw_global: Dict[str, Any] = {}
    else:
        try:
            with global_path.open() as f:
                raw_global = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw_global, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    return BrowserConfig(
        config_root=root,
        ui_title=raw_global.get("ui_title", "World Cities Database"),
        subtitle=raw_global.get("subtitle", "Explore and search through major cities worldwide"),
        page_size=_positive_int(raw_global, "page_size", 10),
        max_visible_pages=_positive_int(raw_global, "max_visible_pages", 5),
        search_limit=_positive_int(raw_global, "search_limit", 10000),
        data_file=_resolve(root, raw_global.get("data_file"), DEFAULT_DATA_FILE),
        export_root=_resolve(root, raw_global.get("export_root"), root / "exports"),
    )
