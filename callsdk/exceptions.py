"""Exception hierarchy for REST API calls.

All errors raised by the SDK inherit from CallSDKError so callers can
catch a single type. Transport failures and API-reported failures are
kept apart: ApiConnectionError means no response was received at all,
ApiError means the server answered with a non-success status.
"""


class CallSDKError(Exception):
    """Base exception for all SDK errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ApiConnectionError(CallSDKError):
    """Raised when the transport could not produce any response."""


class ApiError(CallSDKError):
    """Raised when the API responds with a non-success status.

    Attributes mirror the error body returned by the API.
    """

    def __init__(
        self,
        message: str,
        code: int | None = None,
        more_info: str | None = None,
        status: int | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.more_info = more_info
        self.status = status

    def __str__(self) -> str:
        if self.code is None:
            return f"HTTP {self.status}: {self.message}"
        return f"HTTP {self.status} error {self.code}: {self.message}"


class ConfigurationError(CallSDKError):
    """Raised when client settings are missing or invalid."""
