"""Nagios status codes and the result a check prints before exiting."""

from dataclasses import dataclass
from enum import IntEnum


class Status(IntEnum):
    """Plugin return codes (https://nagios-plugins.org/doc/guidelines.html)."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


@dataclass
class CheckResult:
    status: Status
    summary: str
    detail: str | None = None

    @property
    def exit_code(self) -> int:
        return int(self.status)

    def render(self) -> str:
        """Status line, followed by the upstream error detail when there is one."""
        if self.detail:
            return f"{self.summary}\n{self.detail}"
        return self.summary
