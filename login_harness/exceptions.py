"""Custom exceptions for the login acceptance harness."""


class LoginHarnessError(Exception):
    """Base exception for all harness failures."""

    pass


class ElementNotFoundError(LoginHarnessError):
    """Element did not resolve before the wait expired."""

    pass


class ElementNotInteractableError(LoginHarnessError):
    """Element resolved but rejected the interaction."""

    pass


class WebDriverError(LoginHarnessError):
    """Lower-level automation driver fault (network, session loss, ...)."""

    pass


class BrowserSetupError(WebDriverError):
    """Browser session could not be started."""

    pass


class UnexpectedStateError(LoginHarnessError):
    """Operation attempted in a state that should be impossible."""

    pass


class StepFailedError(AssertionError):
    """A scenario step reported failure."""

    def __init__(self, step: str, error_kind: str, message: str):
        super().__init__(f"Step '{step}' failed with {error_kind}: {message}")
        self.step = step
        self.error_kind = error_kind
        self.message = message
