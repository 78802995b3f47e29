"""
Top-level package for the city browser.

This package exposes the core ordering engine, the data source and the UI adapters.
Most code should import from submodules such as:
    city_browser.core
    city_browser.export
    city_browser.services
    city_browser.ui
"""

__all__: list[str] = []
