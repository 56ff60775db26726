from .status import Status

# Exit code for bad command line input, kept from the original shell plugins
USAGE_EXIT_CODE = 1


class CheckError(Exception):
    """Base exception for check failures that end the invocation."""

    status = Status.CRITICAL

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(message)
        self.detail = detail


class DependencyError(CheckError):
    """A required external binary is not installed."""

    status = Status.UNKNOWN


class TransportError(CheckError):
    """The HTTP request itself failed (DNS, connect, TLS, timeout)."""

    pass


class APIError(CheckError):
    """The call completed but an expected field was null or absent."""

    pass


class TokenError(APIError):
    """The identity endpoint returned no access token."""

    pass
