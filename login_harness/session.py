"""Scenario session lifecycle: one browser session and one LoginPage per scenario."""

import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Union

from selenium.webdriver.remote.webdriver import WebDriver

from .browser_factory import BrowserFactory
from .config import HarnessConfig
from .exceptions import UnexpectedStateError
from .pages import LoginPage

logger = logging.getLogger(__name__)


class Uninitialized:
    """No browser session is held."""

    def __repr__(self) -> str:
        return "Uninitialized"


UNINITIALIZED = Uninitialized()


@dataclass(frozen=True)
class Active:
    """A live browser session with a page that has already been navigated."""

    driver: WebDriver
    page: LoginPage

    def __post_init__(self) -> None:
        if not self.page.navigated:
            raise UnexpectedStateError("Cannot activate a session whose page was never navigated")


SessionState = Union[Uninitialized, Active]


@dataclass
class CleanupReport:
    """What cleanup managed to do. closed_ok is False only if a held session failed to quit."""

    closed_ok: bool = True
    warnings: List[str] = field(default_factory=list)


class ScenarioSession:
    """
    Owns the browser session used by one scenario at a time.

    The previous scenario's session is torn down when the next one is set up,
    not when the previous one ends. A process that exits after its last
    scenario therefore leaves that session open unless close() is called.
    """

    def __init__(self, config: Optional[HarnessConfig] = None, driver_factory: Optional[Callable[[HarnessConfig], WebDriver]] = None):
        self.config = config or HarnessConfig()
        self._driver_factory = driver_factory or BrowserFactory.create_driver
        self._lock = threading.RLock()
        self._state: SessionState = UNINITIALIZED
        self._last_error: Optional[str] = None
        self.last_cleanup: Optional[CleanupReport] = None

    @property
    def state(self) -> SessionState:
        with self._lock:
            return self._state

    @property
    def is_active(self) -> bool:
        return isinstance(self.state, Active)

    @property
    def page(self) -> LoginPage:
        """The current page object. Raises UnexpectedStateError if no scenario is set up."""
        state = self.state
        if not isinstance(state, Active):
            raise UnexpectedStateError("No active session; run 'I am on the login page' first")
        return state.page

    @property
    def driver(self) -> WebDriver:
        return self.page.driver

    @property
    def last_error(self) -> Optional[str]:
        with self._lock:
            return self._last_error

    def record_error(self, message: str) -> None:
        with self._lock:
            self._last_error = message

    def cleanup(self) -> CleanupReport:
        """
        Tear down the held session, if any, and reset all state.

        Never raises. Every step that fails is logged and listed in the report.
        """
        with self._lock:
            report = CleanupReport()
            state = self._state
            if isinstance(state, Active) and not state.page.closed:
                page = state.page
                for name, action in (
                    ("logout", page.logout),
                    ("clear username", page.clear_username),
                    ("clear password", page.clear_password),
                ):
                    try:
                        action()
                    except Exception as e:
                        message = f"Cleanup step '{name}' failed: {e}"
                        logger.warning(message)
                        report.warnings.append(message)
                try:
                    page.quit()
                except Exception as e:
                    message = f"Failed to quit previous browser session: {e}"
                    logger.warning(message)
                    report.warnings.append(message)
                    report.closed_ok = False

            self._state = UNINITIALIZED
            self._last_error = None
            return report

    def setup(self) -> LoginPage:
        """
        Start a fresh scenario: tear down the previous session, open a new one and navigate to the login page.

        Returns:
            The navigated LoginPage

        Raises:
            UnexpectedStateError: If strict_cleanup is set and the previous session could not be closed
            BrowserSetupError: If a new session could not be started
            LoginHarnessError: If navigation failed; the new session is closed again
        """
        with self._lock:
            report = self.cleanup()
            self.last_cleanup = report
            if self._state is not UNINITIALIZED or self._last_error is not None:
                raise UnexpectedStateError("Session state not empty after cleanup")
            if not report.closed_ok and self.config.strict_cleanup:
                raise UnexpectedStateError(f"Previous browser session could not be closed: {'; '.join(report.warnings)}")

            driver = self._driver_factory(self.config)
            try:
                page = LoginPage(driver, self.config)
                page.navigate()
            except Exception:
                try:
                    driver.quit()
                except Exception as quit_error:
                    logger.warning(f"Failed to close half-initialized session: {quit_error}")
                raise

            self._state = Active(driver, page)
            logger.info("Scenario session ready")
            return page

    def close(self) -> CleanupReport:
        """Tear down the current session at the end of a run."""
        logger.info("Closing scenario session")
        return self.cleanup()
