from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "CITY_BROWSER_LOG_FORMAT"
LOG_LEVEL_ENV = "CITY_BROWSER_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Per-request access logs from the Dash dev server drown out the app's own
NOISY_LOGGERS = ("werkzeug",)


def _resolve_level(level: Optional[int]) -> int:
    if level is not None:
        return level
    name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
        level: Optional[int] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure root logger for the city browser

    Modes:
    - JSON (default), one object per line with the `extra` fields
      (search_term, sort_key, n_rows, ...) as top-level keys
    - plain text (dev mode)

    Format selection order:
        1) force_format argument ("json" or "plain") if provided
        2) env var CITY_BROWSER_LOG_FORMAT
        3) default = "json"

    Level: the `level` argument, else CITY_BROWSER_LOG_LEVEL, else INFO.
    """

    if force_format is not None:
        format_mode = force_format
    else:
        format_mode = os.getenv(LOG_FORMAT_ENV, "json").lower()

    root = logging.getLogger()
    root.setLevel(_resolve_level(level))

    handler = logging.StreamHandler()

    if format_mode == "plain":
        formatter = logging.Formatter(LOG_FORMAT)
    else:
        formatter = jsonlogger.JsonFormatter(LOG_FORMAT)

    handler.setFormatter(formatter)

    # Replace any existing handlers to avoid duplicate logs
    root.handlers.clear()
    root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
