class CityBrowserError(Exception):
    """Base exception for all city_browser errors"""
    pass

class ConfigError(CityBrowserError):
    """Invalid or inconsistent global.json"""
    pass

class DataSourceError(CityBrowserError):
    """
    The cities table could not be loaded
    missing file, unreadable CSV, etc
    """
    pass

class SearchBackendError(DataSourceError):
    """The search backend reported a failure for the requested term"""
    pass

class ExportError(CityBrowserError):
    """The CSV export could not be written to storage"""
    pass
