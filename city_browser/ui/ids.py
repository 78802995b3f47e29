from __future__ import annotations

__all__ = ["IDs", "sort_header_id", "page_button_id"]


class IDs:
    class Store:
        BROWSER_SESSION = "browser-session"

    class Control:
        SEARCH_INPUT = "search-input"
        MULTI_SORT_SWITCH = "multi-sort-switch"
        CLEAR_SORT_BTN = "clear-sort-btn"

        # Export
        EXPORT_BTN = "export-btn"
        DOWNLOAD_CSV = "download-csv"

    class Display:
        ERROR_BANNER = "error-banner"
        SEARCH_LIMIT_NOTICE = "search-limit-notice"
        MULTI_SORT_NOTICE = "multi-sort-notice"
        TABLE_CONTAINER = "city-table-container"
        TABLE_LOADING = "city-table-loading"
        PAGINATION_CONTAINER = "pagination-container"


SORT_HEADER_TYPE = "sort-header"
PAGE_BUTTON_TYPE = "page-button"


def sort_header_id(key: str) -> dict:
    return {"type": SORT_HEADER_TYPE, "index": key}


def page_button_id(role: str, page: int) -> dict:
    """
    Pagination buttons carry their target page in the id.
    role is 'first', 'prev', 'next', 'last' or 'number'.
    """
    return {"type": PAGE_BUTTON_TYPE, "role": role, "page": page}
