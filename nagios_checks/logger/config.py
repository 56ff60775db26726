import logging
import sys
import os
from typing import Optional


def setup_logging(
    level: Optional[str] = None, format_string: Optional[str] = None
) -> None:
    """
    Configure logging for a check plugin. Call this once per invocation.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
               If None, reads from LOG_LEVEL env var or defaults to WARNING
        format_string: Optional custom format string
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "WARNING")

    if format_string is None:
        format_string = (
            "[%(asctime)s] [%(levelname)s] [%(name)s:%(funcName)s] %(message)s"
        )

    # Nagios reads the status line from stdout, so logs must stay on stderr
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
