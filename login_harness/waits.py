"""Explicit-wait element access with a fixed poll interval."""

import logging
from typing import Tuple

from selenium.common.exceptions import TimeoutException, WebDriverException
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait
from urllib3.exceptions import HTTPError

from .config import Timeouts
from .exceptions import ElementNotFoundError, WebDriverError

logger = logging.getLogger(__name__)

Locator = Tuple[str, str]

# Faults raised while talking to the driver: protocol errors plus connection loss
# (urllib3 and socket errors come straight from the remote connection)
DRIVER_FAULTS = (WebDriverException, HTTPError, OSError)


class WaitPolicy:
    """
    Poll the DOM for an element until it resolves or the timeout expires.

    Lookups are retried every ``poll_interval`` seconds with no backoff, so a
    lookup for an element that never appears gives up no later than
    ``timeout + poll_interval``.
    """

    def __init__(self, driver: WebDriver, timeout: float = Timeouts.ELEMENT_WAIT, poll_interval: float = Timeouts.POLL_INTERVAL):
        if poll_interval <= 0 or poll_interval > timeout:
            raise ValueError(f"poll_interval must be in (0, timeout], got {poll_interval} for timeout {timeout}")
        self.driver = driver
        self.timeout = timeout
        self.poll_interval = poll_interval

    def _wait(self) -> WebDriverWait:
        return WebDriverWait(self.driver, self.timeout, poll_frequency=self.poll_interval)

    def find(self, locator: Locator) -> WebElement:
        """
        Return the first element matching locator.

        Raises:
            ElementNotFoundError: If nothing matched within the timeout
            WebDriverError: If the driver failed for any other reason
        """
        try:
            return self._wait().until(EC.presence_of_element_located(locator))
        except TimeoutException as e:
            raise ElementNotFoundError(f"Element not found within {self.timeout}s: {locator}") from e
        except DRIVER_FAULTS as e:
            raise WebDriverError(f"Driver error while waiting for {locator}: {e}") from e

    def exists(self, locator: Locator) -> bool:
        """Check whether locator resolves within the timeout, without failing on absence."""
        try:
            self._wait().until(EC.presence_of_element_located(locator))
            return True
        except TimeoutException:
            logger.debug(f"{locator} did not appear within {self.timeout}s")
            return False
        except DRIVER_FAULTS as e:
            raise WebDriverError(f"Driver error while checking for {locator}: {e}") from e
