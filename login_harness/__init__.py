"""Selenium acceptance-test harness for a login flow."""

from .base_page import BasePage
from .browser_factory import BrowserFactory
from .config import HarnessConfig, Timeouts
from .exceptions import (
    BrowserSetupError,
    ElementNotFoundError,
    ElementNotInteractableError,
    LoginHarnessError,
    StepFailedError,
    UnexpectedStateError,
    WebDriverError,
)
from .pages import LoginPage
from .runner import LOGIN_SCENARIOS, Scenario, ScenarioResult, ScenarioRunner
from .session import Active, CleanupReport, ScenarioSession, Uninitialized
from .steps import StepBindings, StepOutcome
from .waits import WaitPolicy

__all__ = [
    "BasePage",
    "BrowserFactory",
    "HarnessConfig",
    "Timeouts",
    "WaitPolicy",
    "LoginPage",
    "ScenarioSession",
    "Active",
    "Uninitialized",
    "CleanupReport",
    "StepBindings",
    "StepOutcome",
    "Scenario",
    "ScenarioResult",
    "ScenarioRunner",
    "LOGIN_SCENARIOS",
    "LoginHarnessError",
    "ElementNotFoundError",
    "ElementNotInteractableError",
    "WebDriverError",
    "BrowserSetupError",
    "UnexpectedStateError",
    "StepFailedError",
]
