"""Nagios check plugins for Azure Logic Apps and negative ping checks."""

from .exceptions import (
    APIError,
    CheckError,
    DependencyError,
    TokenError,
    TransportError,
)
from .status import CheckResult, Status

__all__ = [
    "APIError",
    "CheckError",
    "CheckResult",
    "DependencyError",
    "Status",
    "TokenError",
    "TransportError",
]
