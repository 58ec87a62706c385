"""Step bindings: scenario step phrases mapped onto ScenarioSession and LoginPage calls."""

import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Pattern, Tuple

from selenium.common.exceptions import WebDriverException

from .exceptions import LoginHarnessError, StepFailedError
from .session import ScenarioSession

logger = logging.getLogger(__name__)

STEP_KEYWORDS = re.compile(r"^(Given|When|Then|And|But)\s+")


@dataclass
class StepOutcome:
    """Result of running a single step."""

    step: str
    passed: bool
    error_kind: Optional[str] = None
    message: str = ""

    def raise_for_failure(self) -> None:
        """Raise StepFailedError if the step failed."""
        if not self.passed:
            raise StepFailedError(self.step, self.error_kind or "UnknownError", self.message)


class StepBindings:
    """
    Translate step phrases into page actions and assertions.

    Every binding returns a StepOutcome instead of raising, so callers decide
    how to report a failure.
    """

    def __init__(self, session: ScenarioSession):
        self.session = session
        self._patterns: List[Tuple[Pattern[str], Callable[..., StepOutcome]]] = [
            (re.compile(r"^I am on the login page$"), self.on_login_page),
            (re.compile(r'^I enter username "(.*)"$'), self.enter_username),
            (re.compile(r'^I enter password "(.*)"$'), self.enter_password),
            (re.compile(r"^I click the login button$"), self.click_login_button),
            (re.compile(r"^I should see an error message$"), self.should_see_error_message),
            (re.compile(r'^the error message should contain "(.*)"$'), self.error_message_should_contain),
            (re.compile(r"^I should be logged in successfully$"), self.should_be_logged_in),
            (re.compile(r"^I should see the secure area$"), self.should_see_secure_area),
        ]

    def dispatch(self, step_text: str) -> StepOutcome:
        """Run the binding whose phrase matches step_text (a leading Gherkin keyword is ignored)."""
        phrase = STEP_KEYWORDS.sub("", step_text.strip())
        for pattern, binding in self._patterns:
            match = pattern.match(phrase)
            if match:
                return binding(*match.groups())
        logger.error(f"No binding for step: {step_text}")
        return StepOutcome(step_text, passed=False, error_kind="UndefinedStep", message=f"No step matches '{phrase}'")

    def _run(self, step: str, action: Callable[[], None]) -> StepOutcome:
        logger.info(f"Step: {step}")
        try:
            action()
        except AssertionError as e:
            logger.error(f"Step failed: {step}: {e}")
            return StepOutcome(step, passed=False, error_kind="AssertionError", message=str(e))
        except (LoginHarnessError, WebDriverException) as e:
            logger.error(f"Step failed: {step}: {type(e).__name__}: {e}")
            return StepOutcome(step, passed=False, error_kind=type(e).__name__, message=str(e))
        except Exception as e:
            logger.exception(f"Unexpected error during step: {step}")
            return StepOutcome(step, passed=False, error_kind=type(e).__name__, message=str(e))
        return StepOutcome(step, passed=True)

    def on_login_page(self) -> StepOutcome:
        return self._run("I am on the login page", self.session.setup)

    def enter_username(self, username: str) -> StepOutcome:
        return self._run(f'I enter username "{username}"', lambda: self.session.page.enter_username(username))

    def enter_password(self, password: str) -> StepOutcome:
        return self._run(f'I enter password "{password}"', lambda: self.session.page.enter_password(password))

    def click_login_button(self) -> StepOutcome:
        return self._run("I click the login button", lambda: self.session.page.click_login_button())

    def should_see_error_message(self) -> StepOutcome:
        def capture() -> None:
            self.session.record_error(self.session.page.get_error_message())

        return self._run("I should see an error message", capture)

    def error_message_should_contain(self, expected: str) -> StepOutcome:
        def check() -> None:
            message = self.session.last_error
            if message is None:
                raise AssertionError("No error message was captured")
            if expected not in message:
                raise AssertionError(f"Expected error message to contain '{expected}', but got '{message}'")

        return self._run(f'the error message should contain "{expected}"', check)

    def should_be_logged_in(self) -> StepOutcome:
        def check() -> None:
            if not self.session.page.is_logged_in():
                raise AssertionError("Success banner did not appear")

        return self._run("I should be logged in successfully", check)

    def should_see_secure_area(self) -> StepOutcome:
        def check() -> None:
            if not self.session.page.is_in_secure_area():
                raise AssertionError("Page heading does not mention the secure area")

        return self._run("I should see the secure area", check)
