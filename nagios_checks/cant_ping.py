#!/usr/bin/env python3
"""Check that a host does NOT answer ping.

Usage: checkCantPing <host>

OK when no echo reply comes back, CRITICAL when the host responds.
"""

import argparse
import logging
import re
import shutil
import subprocess
import sys

from . import config
from .exceptions import DependencyError
from .logger import setup_logging
from .status import CheckResult, Status
from .validation import PluginArgumentParser

logger = logging.getLogger(__name__)

# "1 packets transmitted, 0 received, 100% packet loss" (iputils)
# "1 packets transmitted, 0 packets received, 100.0% packet loss" (BSD, busybox)
RECEIVED_RE = re.compile(r"(\d+)\s+(?:packets\s+)?received")


def build_parser() -> argparse.ArgumentParser:
    parser = PluginArgumentParser(
        prog="checkCantPing",
        description="Check that a host does not respond to ping.",
    )
    parser.add_argument("host", help="host name or address that must not respond")
    return parser


def ping_command(host: str) -> list[str]:
    ping = shutil.which("ping")
    if ping is None:
        raise DependencyError("ping binary not installed")
    return [ping, "-c", "1", "-w", str(config.PING_DEADLINE), host]


def replies_received(output: str) -> int:
    """Echo replies counted in ping's summary; 0 when there is no summary."""
    match = RECEIVED_RE.search(output)
    return int(match.group(1)) if match else 0


def check_cant_ping(host: str) -> CheckResult:
    try:
        command = ping_command(host)
    except DependencyError as e:
        return CheckResult(e.status, f"{e.status.name} - {e}")

    completed = subprocess.run(command, capture_output=True, text=True, check=False)
    logger.debug("ping exited %d: %s", completed.returncode, completed.stdout.strip())
    if completed.stderr:
        logger.info("ping stderr: %s", completed.stderr.strip())

    if replies_received(completed.stdout) > 0:
        return CheckResult(
            Status.CRITICAL,
            f"CRITICAL: Can ping {host} - it should not be responding",
        )
    return CheckResult(Status.OK, f"OK: Cant ping {host}")


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)

    try:
        result = check_cant_ping(args.host)
    except Exception as e:
        logger.exception("Check failed with unexpected error")
        result = CheckResult(Status.UNKNOWN, f"UNKNOWN - {e}")

    print(result.render())
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
