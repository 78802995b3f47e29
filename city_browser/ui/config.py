from dataclasses import dataclass
from typing import Optional

from city_browser.config.model import BrowserConfig
from city_browser.services.browser_service import BrowserService


@dataclass
class AppConfig:
    browser_config: BrowserConfig
    browser_service: Optional[BrowserService] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.browser_service is None:
            raise RuntimeError("AppConfig.browser_service must be initialized.")
