"""Command line entry point running the built-in login scenarios."""

import argparse
import logging
import sys
from typing import List, Optional

from .config import HarnessConfig, Timeouts
from .logging_utils import setup_logging
from .runner import LOGIN_SCENARIOS, ScenarioRunner

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run login acceptance scenarios against a WebDriver endpoint")
    parser.add_argument("--driver-url", default="http://localhost:9515", help="Automation driver endpoint (default: http://localhost:9515)")
    parser.add_argument("--login-url", default="http://the-internet.herokuapp.com/login", help="Login page under test")
    parser.add_argument("--browser", choices=["chrome", "firefox"], default="chrome", help="Browser to request (default: chrome)")
    parser.add_argument("--headless", action="store_true", default=True, help="Run browser in headless mode (default: True)")
    parser.add_argument("--no-headless", action="store_false", dest="headless", help="Run browser with GUI")
    parser.add_argument("--timeout", type=float, default=Timeouts.ELEMENT_WAIT, help="Element wait timeout in seconds (default: 10)")
    parser.add_argument("--poll-interval", type=float, default=Timeouts.POLL_INTERVAL, help="Element poll interval in seconds (default: 0.5)")
    parser.add_argument("--artifacts-dir", default="/tmp/login-harness-artifacts", help="Where to save screenshots of failed scenarios")
    parser.add_argument("--strict-cleanup", action="store_true", help="Fail setup if the previous session could not be closed")
    parser.add_argument("--close-on-exit", action="store_true", help="Close the last browser session when the run ends")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the login scenarios.

    Returns:
        0 if every scenario passed, 1 otherwise
    """
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level.upper(), logging.INFO))

    try:
        config = HarnessConfig(
            driver_url=args.driver_url,
            login_url=args.login_url,
            browser=args.browser,
            headless=args.headless,
            wait_timeout=args.timeout,
            poll_interval=args.poll_interval,
            artifacts_dir=args.artifacts_dir,
            strict_cleanup=args.strict_cleanup,
            close_on_exit=args.close_on_exit,
        )
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    with ScenarioRunner(config) as runner:
        results = runner.run_all(LOGIN_SCENARIOS)

    for result in results:
        failed = result.failed_step
        if failed:
            print(f"FAIL  {result.name}: '{failed.step}' -> {failed.error_kind}: {failed.message}")
        else:
            print(f"PASS  {result.name}")
    return 0 if all(result.passed for result in results) else 1


if __name__ == "__main__":
    sys.exit(main())
