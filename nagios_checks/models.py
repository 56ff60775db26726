"""Pydantic models for the identity, Resource Manager and Graph responses.

Only the fields the checks read are declared; everything else is ignored.
"""

import re
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel

# Graph trims or extends the fraction (".63", ".6303387"); fromisoformat wants six digits
_FRACTION_RE = re.compile(r"\.(\d+)")


class TokenResponse(BaseModel):
    access_token: str | None = None
    token_type: str | None = None
    expires_in: int | str | None = None
    error: str | None = None
    error_description: str | None = None


class ErrorBody(BaseModel):
    code: str | None = None
    message: str | None = None


class ApiErrorResponse(BaseModel):
    error: ErrorBody | None = None

    @property
    def error_message(self) -> str | None:
        return self.error.message if self.error else None


class WorkflowRunList(ApiErrorResponse):
    value: list[dict[str, Any]] | None = None


class PasswordCredential(BaseModel):
    keyId: str | None = None
    displayName: str | None = None
    endDateTime: str | None = None

    @property
    def expires_at(self) -> datetime | None:
        return parse_graph_datetime(self.endDateTime)


class PasswordCredentialList(ApiErrorResponse):
    value: list[PasswordCredential] | None = None


def parse_graph_datetime(value: str | None) -> datetime | None:
    """Parse an ISO 8601 timestamp from Graph into an aware UTC datetime."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(
            _FRACTION_RE.sub(_six_digit_fraction, value.replace("Z", "+00:00"))
        )
    except (ValueError, TypeError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _six_digit_fraction(match: re.Match) -> str:
    return "." + match.group(1)[:6].ljust(6, "0")
