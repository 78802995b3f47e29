from .callbacks_browser import register_browser_callbacks
from .callbacks_export import register_export_callbacks

__all__ = ["register_browser_callbacks", "register_export_callbacks"]
