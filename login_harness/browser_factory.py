"""Browser factory for opening WebDriver sessions against a running driver endpoint."""

import logging
from typing import Literal, Union

from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.firefox.options import Options as FirefoxOptions
from selenium.webdriver.remote.webdriver import WebDriver

from .config import HarnessConfig, Timeouts
from .exceptions import BrowserSetupError

logger = logging.getLogger(__name__)


class BrowserFactory:
    """Factory for creating browser sessions."""

    @staticmethod
    def create_driver(config: HarnessConfig) -> WebDriver:
        """
        Open a new session on the automation driver at config.driver_url.

        Args:
            config: Harness configuration (endpoint, browser type, headless mode)

        Returns:
            Connected WebDriver instance

        Raises:
            BrowserSetupError: If the session could not be created
        """
        try:
            options = BrowserFactory._build_options(config.browser, config.headless)
            logger.info(f"Requesting {config.browser} session from {config.driver_url}")
            driver = webdriver.Remote(command_executor=config.driver_url, options=options)
            driver.set_page_load_timeout(Timeouts.PAGE_LOAD)
            logger.info(f"{config.browser} session {driver.session_id} created")
            return driver
        except Exception as e:
            raise BrowserSetupError(f"Failed to create {config.browser} session at {config.driver_url}: {e}") from e

    @staticmethod
    def _build_options(browser_type: Literal["chrome", "firefox"], headless: bool) -> Union[ChromeOptions, FirefoxOptions]:
        if browser_type == "chrome":
            options = ChromeOptions()
            if headless:
                options.add_argument("--headless=new")
            options.add_argument("--no-sandbox")
            options.add_argument("--disable-dev-shm-usage")
            options.add_argument("--disable-gpu")
            options.add_argument("--disable-extensions")
            options.add_argument("--disable-notifications")
            options.set_capability("pageLoadStrategy", "normal")
            return options
        elif browser_type == "firefox":
            options = FirefoxOptions()
            if headless:
                options.add_argument("--headless")
            options.set_preference("dom.webnotifications.enabled", False)
            options.set_preference("media.volume_scale", "0.0")
            return options
        else:
            raise ValueError(f"Unsupported browser type: {browser_type}")
