"""Consistent logging setup for harness entry points."""

import logging
import sys


def setup_logging(level: int = logging.INFO) -> None:
    """
    Setup consistent logging configuration for harness runs.

    Configures:
    - Line-buffered stdout/stderr so step progress shows up immediately in CI logs
    - Consistent log format with timestamps
    - Specified log level

    Args:
        level: Logging level (default: INFO)
    """
    sys.stdout.reconfigure(line_buffering=True)  # type: ignore[union-attr,attr-defined]
    sys.stderr.reconfigure(line_buffering=True)  # type: ignore[union-attr,attr-defined]

    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
