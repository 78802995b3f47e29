"""
Service layer: the city data source, CSV export to storage and the browser
session service tying search, sorting, paging and export together.
"""

from .browser_service import BrowserService, BrowserSession
from .city_source import CitySource, SearchResult
from .export_service import ExportService
from .storage import LocalFileSystemStorage, StorageBackend

__all__ = [
    "BrowserService",
    "BrowserSession",
    "CitySource",
    "ExportService",
    "LocalFileSystemStorage",
    "SearchResult",
    "StorageBackend",
]
