"""Base page class for Page Object Model."""

import logging
import time
from pathlib import Path
from typing import Callable, Optional, TypeVar

from selenium.common.exceptions import ElementNotInteractableException, InvalidElementStateException
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from .config import HarnessConfig
from .exceptions import ElementNotInteractableError, UnexpectedStateError, WebDriverError
from .waits import DRIVER_FAULTS, Locator, WaitPolicy

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BasePage:
    """Base class for all page objects."""

    def __init__(self, driver: WebDriver, config: Optional[HarnessConfig] = None):
        """
        Initialize page object.

        The driver is shared with the session owner, which is responsible for
        closing it. Only quit() ends the session from here.

        Args:
            driver: Selenium WebDriver instance
            config: Harness configuration (wait timeout and poll interval)
        """
        self.driver = driver
        self.config = config or HarnessConfig()
        self.wait = WaitPolicy(driver, self.config.wait_timeout, self.config.poll_interval)
        self.navigated = False
        self.closed = False

    def _ensure_open(self) -> None:
        if self.closed:
            raise UnexpectedStateError(f"{type(self).__name__} used after quit()")

    def _ensure_navigated(self) -> None:
        self._ensure_open()
        if not self.navigated:
            raise UnexpectedStateError(f"{type(self).__name__} used before navigate()")

    def navigate_to(self, url: str) -> None:
        """Load url in the browser."""
        self._ensure_open()
        logger.info(f"Navigating to {url}")
        try:
            self.driver.get(url)
        except DRIVER_FAULTS as e:
            raise WebDriverError(f"Failed to load {url}: {e}") from e

    def get_current_url(self) -> str:
        """Return current page URL."""
        return self.driver.current_url

    def get_current_title(self) -> str:
        """Return current page title."""
        return self.driver.title

    def find_element(self, locator: Locator) -> WebElement:
        """Wait for locator and return the element (see WaitPolicy.find)."""
        self._ensure_navigated()
        return self.wait.find(locator)

    def element_exists(self, locator: Locator) -> bool:
        """Wait for locator and report whether it appeared (see WaitPolicy.exists)."""
        self._ensure_navigated()
        return self.wait.exists(locator)

    def interact(self, locator: Locator, action: Callable[[WebElement], T]) -> T:
        """
        Resolve locator and apply action to the element.

        Raises:
            ElementNotFoundError: If the element never appeared
            ElementNotInteractableError: If the element rejected the interaction
            WebDriverError: For any other driver fault
        """
        element = self.find_element(locator)
        try:
            return action(element)
        except (ElementNotInteractableException, InvalidElementStateException) as e:
            raise ElementNotInteractableError(f"Element rejected interaction: {locator}") from e
        except DRIVER_FAULTS as e:
            raise WebDriverError(f"Driver error while interacting with {locator}: {e}") from e

    def save_screenshot(self, artifacts_dir: str, name: str) -> str:
        """
        Save a screenshot using the WebDriver's save_screenshot method.

        Args:
            artifacts_dir: Directory to write the screenshot into
            name: Base name for the screenshot file (no extension)

        Returns:
            Path to the saved screenshot file as string, "" on failure
        """
        try:
            Path(artifacts_dir).mkdir(parents=True, exist_ok=True)
            timestamp = time.strftime("%Y%m%d-%H%M%S")
            path = Path(artifacts_dir) / f"{name}-{timestamp}.png"
            self.driver.save_screenshot(str(path))
            return str(path)
        except Exception as e:
            logger.warning(f"Failed to save screenshot: {e}")
            return ""

    def save_page_source(self, artifacts_dir: str, name: str) -> str:
        """
        Save the current page source to a file.

        Args:
            artifacts_dir: Directory to write the page source into
            name: Base name for the file (no extension)

        Returns:
            Path to the saved page source file as string, "" on failure
        """
        try:
            Path(artifacts_dir).mkdir(parents=True, exist_ok=True)
            timestamp = time.strftime("%Y%m%d-%H%M%S")
            path = Path(artifacts_dir) / f"{name}-{timestamp}.html"
            with open(path, "w", encoding="utf-8") as f:
                f.write(self.driver.page_source)
            return str(path)
        except Exception as e:
            logger.warning(f"Failed to save page source: {e}")
            return ""

    def save_debug_artifacts(self, artifacts_dir: str, name: str) -> dict:
        """Save screenshot and page source and return their paths along with the URL and title the browser was on."""
        artifacts = {
            "screenshot": self.save_screenshot(artifacts_dir, name),
            "page_source": self.save_page_source(artifacts_dir, name),
            "url": "",
            "title": "",
        }
        try:
            artifacts["url"] = self.get_current_url()
            artifacts["title"] = self.get_current_title()
        except Exception as e:
            logger.warning(f"Failed to read current location: {e}")
        return artifacts
