"""Configuration classes for the login acceptance harness."""

from dataclasses import dataclass
from typing import Literal


class Timeouts:
    """Timeout constants for different wait scenarios."""

    PAGE_LOAD = 30  # Selenium page load timeout
    ELEMENT_WAIT = 10  # Explicit element waits
    POLL_INTERVAL = 0.5  # Fixed cadence between element lookups


@dataclass
class HarnessConfig:
    """Harness configuration settings."""

    driver_url: str = "http://localhost:9515"
    login_url: str = "http://the-internet.herokuapp.com/login"
    browser: Literal["chrome", "firefox"] = "chrome"
    headless: bool = True
    wait_timeout: float = Timeouts.ELEMENT_WAIT
    poll_interval: float = Timeouts.POLL_INTERVAL
    # Directory to save debug artifacts (screenshots, page sources)
    artifacts_dir: str = "/tmp/login-harness-artifacts"
    # Refuse to start a new session if the previous one could not be closed
    strict_cleanup: bool = False
    # Close the last session when the runner exits instead of leaving it for the next setup
    close_on_exit: bool = False

    def __post_init__(self) -> None:
        if self.poll_interval <= 0:
            raise ValueError(f"poll_interval must be positive, got {self.poll_interval}")
        if self.poll_interval > self.wait_timeout:
            raise ValueError(f"poll_interval ({self.poll_interval}) must not exceed wait_timeout ({self.wait_timeout})")
