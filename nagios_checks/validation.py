"""Command line parsing shared by the check plugins.

Bad input prints ``ERROR: ...`` followed by the usage text on stdout and
exits with USAGE_EXIT_CODE, before any network or subprocess call.
"""

import argparse
import logging
import re
import sys
from typing import NoReturn

from .exceptions import USAGE_EXIT_CODE

GUID_RE = re.compile(r"^[0-9A-Fa-f-]{36}$")
NUMBER_RE = re.compile(r"^[0-9]+$")

HELP_FLAGS = ("-h", "--help")
MISSING_ARGUMENTS = "the following arguments are required"

logger = logging.getLogger(__name__)


def is_guid(value: str) -> bool:
    return bool(GUID_RE.match(value))


def is_number(value: str) -> bool:
    return bool(NUMBER_RE.match(value))


def guid(name: str):
    """argparse ``type`` that accepts a 36 character hex-and-dash id."""

    def parse(value: str) -> str:
        if not is_guid(value):
            raise argparse.ArgumentTypeError(f"{name} GUID {value} is in wrong format")
        return value

    return parse


def whole_number(name: str):
    def parse(value: str) -> int:
        if not is_number(value):
            raise argparse.ArgumentTypeError(f"{name} value {value} is not a number")
        return int(value)

    return parse


class PluginArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reads its arguments the way the Nagios plugins do.

    Every argument is positional, so values starting with "-" (client
    secrets can) are never taken for options, and anything past the last
    declared argument is ignored.
    """

    def parse_args(self, args=None, namespace=None):
        args = sys.argv[1:] if args is None else list(args)
        if not args or args[0] not in (*HELP_FLAGS, "--"):
            args = ["--", *args]
        parsed, extras = self.parse_known_args(args, namespace)
        if extras:
            logger.debug("Ignoring extra arguments: %d", len(extras))
        return parsed

    def error(self, message: str) -> NoReturn:
        if message.startswith(MISSING_ARGUMENTS):
            message = "Missing parameters"
        elif message.startswith("argument "):
            # "argument tenant: <text>" -> "<text>"
            message = message.split(": ", 1)[-1]
        print(f"ERROR: {message}", file=sys.stdout)
        self.print_help(sys.stdout)
        self.exit(USAGE_EXIT_CODE)
