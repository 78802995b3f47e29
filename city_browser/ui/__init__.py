"""
Dash front end: layout builders and callbacks.

The UI only calls BrowserService; it holds no sorting or paging logic.
"""
