"""Tests for StepBindings."""

from unittest.mock import patch

import pytest
from urllib3.exceptions import MaxRetryError

from login_harness.exceptions import StepFailedError
from login_harness.session import ScenarioSession
from login_harness.steps import StepBindings, StepOutcome


@pytest.fixture
def session(harness_config, driver_factory):
    return ScenarioSession(harness_config, driver_factory=driver_factory)


@pytest.fixture
def bindings(session):
    return StepBindings(session)


def run(bindings, *steps):
    return [bindings.dispatch(step) for step in steps]


def test_outcome_raise_for_failure():
    StepOutcome("ok", passed=True).raise_for_failure()

    with pytest.raises(StepFailedError, match="ElementNotFoundError") as exc_info:
        StepOutcome("I should see an error message", False, "ElementNotFoundError", "gone").raise_for_failure()
    assert exc_info.value.step == "I should see an error message"
    assert isinstance(exc_info.value, AssertionError)


def test_dispatch_strips_keywords(bindings, driver_factory):
    outcome = bindings.dispatch("Given I am on the login page")

    assert outcome == StepOutcome("I am on the login page", passed=True)
    assert len(driver_factory.drivers) == 1


def test_dispatch_passes_quoted_argument(bindings, driver_factory):
    run(bindings, "Given I am on the login page", 'When I enter username "tomsmith"', 'And I enter password "a b"')

    assert driver_factory.drivers[0].fields == {"username": "tomsmith", "password": "a b"}


def test_dispatch_undefined_step(bindings):
    outcome = bindings.dispatch("When I dance")

    assert outcome.passed is False
    assert outcome.error_kind == "UndefinedStep"


def test_valid_login_steps(bindings):
    outcomes = run(
        bindings,
        "Given I am on the login page",
        'When I enter username "tomsmith"',
        'And I enter password "SuperSecretPassword!"',
        "And I click the login button",
        "Then I should be logged in successfully",
        "And I should see the secure area",
    )

    assert all(outcome.passed for outcome in outcomes)


def test_invalid_login_steps_capture_error(bindings, session):
    outcomes = run(
        bindings,
        "Given I am on the login page",
        'When I enter username "invalid"',
        'And I enter password "invalid"',
        "And I click the login button",
        "Then I should see an error message",
        'And the error message should contain "Your username is invalid!"',
    )

    assert all(outcome.passed for outcome in outcomes)
    assert "Your username is invalid!" in session.last_error


def test_error_message_mismatch(bindings, session):
    bindings.on_login_page()
    session.record_error("Your password is invalid!")

    outcome = bindings.error_message_should_contain("Your username is invalid!")

    assert outcome.passed is False
    assert outcome.error_kind == "AssertionError"
    assert "but got 'Your password is invalid!'" in outcome.message


def test_error_message_not_captured(bindings):
    bindings.on_login_page()

    outcome = bindings.error_message_should_contain("anything")

    assert outcome.passed is False
    assert outcome.message == "No error message was captured"


def test_missing_error_banner_reports_kind(bindings, session):
    bindings.on_login_page()

    outcome = bindings.should_see_error_message()

    assert outcome.passed is False
    assert outcome.error_kind == "ElementNotFoundError"
    assert session.last_error is None


def test_not_logged_in_is_assertion_failure(bindings):
    bindings.on_login_page()

    outcome = bindings.should_be_logged_in()

    assert outcome.error_kind == "AssertionError"


def test_step_before_setup_is_unexpected_state(bindings):
    outcome = bindings.enter_username("tomsmith")

    assert outcome.passed is False
    assert outcome.error_kind == "UnexpectedStateError"


def test_setup_failure_reported(bindings, driver_factory):
    driver_factory.fail_next = True

    outcome = bindings.on_login_page()

    assert outcome.passed is False
    assert outcome.error_kind == "BrowserSetupError"


def test_error_cleared_by_next_setup(bindings, session):
    bindings.on_login_page()
    session.record_error("Your username is invalid!")

    bindings.on_login_page()

    assert session.last_error is None


def test_driver_unreachable_reported_as_outcome(bindings, driver_factory):
    """Test a dropped driver connection yields a failed outcome instead of escaping dispatch."""
    bindings.on_login_page()

    def unreachable(by, value):
        raise MaxRetryError(None, "/session/x/element", "Connection refused")

    driver_factory.drivers[0].find_element = unreachable

    outcome = bindings.dispatch('When I enter username "tomsmith"')

    assert outcome.passed is False
    assert outcome.error_kind == "WebDriverError"


def test_unexpected_exception_reported_as_outcome(bindings, session):
    bindings.on_login_page()

    with patch.object(session.page, "click_login_button", side_effect=RuntimeError("renderer crashed")):
        outcome = bindings.dispatch("And I click the login button")

    assert outcome == StepOutcome("I click the login button", False, "RuntimeError", "renderer crashed")
