from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Sequence

from city_browser.core.exceptions import ExportError
from city_browser.export.csv_export import default_export_filename, to_csv
from city_browser.export.model import CITY_EXPORT_COLUMNS, ExportColumn, ExportResult
from city_browser.services.storage import StorageBackend

logger = logging.getLogger(__name__)


class ExportService:
    """
    Serialises rows to CSV and writes the blob to a storage backend.
    Stateless apart from the backend and the column layout.
    """

    def __init__(
            self,
            storage: StorageBackend,
            *,
            columns: Sequence[ExportColumn] = CITY_EXPORT_COLUMNS,
    ) -> None:
        self.storage = storage
        self.columns = tuple(columns)

    def write(self, rows: Iterable[Any], filename: Optional[str] = None) -> Optional[ExportResult]:
        """
        Write rows as CSV. Returns None (and writes nothing) when there are no rows.

        :raises ExportError: if the storage backend fails to write.
        """
        rows = list(rows)
        content = to_csv(rows, self.columns)
        if not content:
            logger.info("Nothing to export")
            return None

        filename = filename or default_export_filename()
        try:
            self.storage.write_bytes(filename, content.encode("utf-8"))
        except OSError as e:
            logger.exception("Failed to write export %s", filename)
            raise ExportError(f"Could not write export '{filename}': {e}") from e

        logger.info("Export written", extra={"export_file": filename, "n_rows": len(rows)})
        return ExportResult(
            filename=filename,
            content=content,
            n_rows=len(rows),
            local_path=self.storage.local_path(filename),
        )
