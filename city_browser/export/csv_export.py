"""
CSV serialisation of city rows.

Output shape:

    City Name,Country,Population,Capital Status
    "Tokyo","Japan",39105000,"Primary Capital"

Text cells are always double-quoted, numbers are bare decimal integers and
lines are joined with '\\n' with no trailing newline. An empty row set gives
an empty string, not a header-only file.

Embedded double quotes are escaped by doubling them ("" inside a quoted
cell), so a value like 'The "Big" Apple' stays a single field.
Line breaks inside a value are replaced by a space so every row stays on
one line.
"""
from __future__ import annotations

import csv
import io
import logging
import re
from datetime import date, datetime, timezone
from typing import Any, Iterable, Optional, Sequence

from city_browser.core.city import format_capital_status, get_field
from city_browser.core.comparator import is_missing
from city_browser.export.model import CITY_EXPORT_COLUMNS, ColumnKind, ExportColumn

logger = logging.getLogger(__name__)

LINE_TERMINATOR = "\n"

# One row per line: line breaks inside a value become a single space
_LINE_BREAKS = re.compile(r"\r\n|\r|\n")


def _format_cell(row: Any, column: ExportColumn) -> Any:
    value = get_field(row, column.key)

    if column.kind is ColumnKind.CAPITAL:
        return format_capital_status(value)

    if is_missing(value):
        return ""

    if column.kind is ColumnKind.NUMBER and not isinstance(value, (str, bool)):
        return int(value)

    return _LINE_BREAKS.sub(" ", str(value))


def to_csv(
    rows: Iterable[Any],
    columns: Sequence[ExportColumn] = CITY_EXPORT_COLUMNS,
) -> str:
    rows = list(rows)
    if not rows:
        return ""

    buf = io.StringIO()

    # Header line is written bare: City Name,Country,...
    csv.writer(buf, lineterminator=LINE_TERMINATOR).writerow([c.header for c in columns])

    writer = csv.writer(buf, quoting=csv.QUOTE_NONNUMERIC, lineterminator=LINE_TERMINATOR)
    for row in rows:
        writer.writerow([_format_cell(row, c) for c in columns])

    content = buf.getvalue()[: -len(LINE_TERMINATOR)]
    logger.debug("Serialised rows to CSV", extra={"n_rows": len(rows), "n_columns": len(columns)})
    return content


def default_export_filename(today: Optional[date] = None) -> str:
    """cities-export-<ISO date>.csv, dated in UTC unless a date is given."""
    if today is None:
        today = datetime.now(timezone.utc).date()
    return f"cities-export-{today.isoformat()}.csv"
