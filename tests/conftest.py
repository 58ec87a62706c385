"""
Pytest configuration and fixtures for login harness tests.

FakeDriver stands in for a remote WebDriver session. It models the login
application closely enough for page objects and the session lifecycle to be
exercised without a browser: a login form, a secure area behind it, flash
banners for success and failure, and a logout button.
"""
from typing import List, Optional

import pytest
from selenium.common.exceptions import (
    ElementNotInteractableException,
    InvalidSessionIdException,
    NoSuchElementException,
    WebDriverException,
)
from selenium.webdriver.common.by import By

from login_harness.config import HarnessConfig
from login_harness.exceptions import BrowserSetupError

VALID_USERNAME = "tomsmith"
VALID_PASSWORD = "SuperSecretPassword!"


class FakeElement:
    """Element handle returned by FakeDriver.find_element."""

    def __init__(self, driver: "FakeDriver", key: str, text: str = ""):
        self.driver = driver
        self.key = key
        self._text = text

    @property
    def text(self) -> str:
        self.driver._check_session()
        return self._text

    def _check_interactable(self) -> None:
        self.driver._check_session()
        if self.key in self.driver.disabled:
            raise ElementNotInteractableException(f"{self.key} is not interactable")

    def send_keys(self, text: str) -> None:
        self._check_interactable()
        self.driver.interactions.append(("send_keys", self.key, text))
        self.driver.fields[self.key] += text

    def clear(self) -> None:
        self._check_interactable()
        self.driver.interactions.append(("clear", self.key))
        self.driver.fields[self.key] = ""

    def click(self) -> None:
        self._check_interactable()
        self.driver.interactions.append(("click", self.key))
        if self.key == "submit":
            self.driver._submit()
        elif self.key == "logout":
            self.driver._show_login()


class FakeDriver:
    """In-memory stand-in for a WebDriver session on the login application."""

    def __init__(self, session_id: str = "fake-session"):
        self.session_id = session_id
        self.page: Optional[str] = None
        self.flash: Optional[str] = None
        self.fields = {"username": "", "password": ""}
        self.disabled: set = set()
        self.interactions: list = []
        self.visited: List[str] = []
        self.quit_called = 0
        self.fail_quit = False
        self.lookups = 0

    def _check_session(self) -> None:
        if self.quit_called:
            raise InvalidSessionIdException("invalid session id")

    def _show_login(self) -> None:
        self.page = "login"
        self.flash = None
        self.fields = {"username": "", "password": ""}

    def _submit(self) -> None:
        username, password = self.fields["username"], self.fields["password"]
        if username == VALID_USERNAME and password == VALID_PASSWORD:
            self.page = "secure"
            self.flash = "success"
        else:
            self._show_login()
            self.flash = "bad-username" if username != VALID_USERNAME else "bad-password"

    def get(self, url: str) -> None:
        self._check_session()
        self.visited.append(url)
        self._show_login()

    @property
    def current_url(self) -> str:
        return self.visited[-1] if self.visited else "about:blank"

    @property
    def title(self) -> str:
        return "The Internet"

    @property
    def page_source(self) -> str:
        return f"<html><body data-page='{self.page}'></body></html>"

    def save_screenshot(self, path: str) -> bool:
        with open(path, "wb") as f:
            f.write(b"\x89PNG")
        return True

    def _elements(self) -> dict:
        if self.page == "login":
            elements = {
                (By.ID, "username"): FakeElement(self, "username"),
                (By.ID, "password"): FakeElement(self, "password"),
                (By.CSS_SELECTOR, "button[type='submit']"): FakeElement(self, "submit"),
                (By.CSS_SELECTOR, "h2"): FakeElement(self, "heading", "Login Page"),
            }
            if self.flash in ("bad-username", "bad-password"):
                which = "username" if self.flash == "bad-username" else "password"
                elements[(By.CSS_SELECTOR, ".flash.error")] = FakeElement(self, "error", f"Your {which} is invalid!\n×")
            return elements
        if self.page == "secure":
            return {
                (By.CSS_SELECTOR, ".flash.success"): FakeElement(self, "success", "You logged into a secure area!\n×"),
                (By.CSS_SELECTOR, "h2"): FakeElement(self, "heading", "Secure Area"),
                (By.CSS_SELECTOR, ".button.secondary"): FakeElement(self, "logout", "Logout"),
            }
        return {}

    def find_element(self, by: str, value: str) -> FakeElement:
        self._check_session()
        self.lookups += 1
        element = self._elements().get((by, value))
        if element is None:
            raise NoSuchElementException(f"no such element: {by}={value}")
        return element

    def quit(self) -> None:
        if self.fail_quit:
            raise WebDriverException("chromedriver unreachable")
        self.quit_called += 1


class FakeDriverFactory:
    """Driver factory handing out a new FakeDriver per session and remembering them."""

    def __init__(self):
        self.drivers: List[FakeDriver] = []
        self.fail_next = False

    def __call__(self, config: HarnessConfig) -> FakeDriver:
        if self.fail_next:
            self.fail_next = False
            raise BrowserSetupError("session not created")
        driver = FakeDriver(session_id=f"fake-session-{len(self.drivers) + 1}")
        self.drivers.append(driver)
        return driver


@pytest.fixture
def harness_config(tmp_path):
    """Configuration with short waits so absent elements fail fast."""
    return HarnessConfig(wait_timeout=0.3, poll_interval=0.05, artifacts_dir=str(tmp_path / "artifacts"))


@pytest.fixture
def fake_driver():
    """Create a fake WebDriver session."""
    return FakeDriver()


@pytest.fixture
def driver_factory():
    """Create a factory of fake WebDriver sessions."""
    return FakeDriverFactory()


@pytest.fixture(scope="module")
def shared_driver_factory():
    """Driver factory shared by every test in a module, for scenarios that run back to back."""
    return FakeDriverFactory()
