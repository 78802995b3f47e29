from .csv_export import default_export_filename, to_csv
from .model import CITY_EXPORT_COLUMNS, ColumnKind, ExportColumn, ExportResult

__all__ = [
    "CITY_EXPORT_COLUMNS",
    "ColumnKind",
    "ExportColumn",
    "ExportResult",
    "default_export_filename",
    "to_csv",
]
