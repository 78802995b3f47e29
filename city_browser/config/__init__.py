"""
Config package for city_browser.

Responsible for:
- the config model (BrowserConfig)
- config I/O (load_browser_config)
"""

from .model import BrowserConfig
from .io import load_browser_config

__all__ = ["BrowserConfig", "load_browser_config"]
