from headliner.models.news import ErrorResponse


class NewsAPIError(Exception):
    """Base class for every failure raised by a News API call.

    ``operation`` is filled in by the endpoint function that surfaced the error
    and prefixes the message.
    """

    operation: str | None = None

    def __str__(self) -> str:
        message = super().__str__()
        if self.operation:
            return f"{self.operation}: {message}"
        return message


class TransportError(NewsAPIError):
    """Raised when no HTTP response was obtained (DNS, connection, TLS, timeout)."""


class APIError(NewsAPIError):
    """Raised when the API answers with a non-200 status."""

    def __init__(self, status_code: int, error: ErrorResponse):
        self.status_code = status_code
        self.error = error
        detail = f"News API error ({status_code})"
        parts = [part for part in (error.code, error.message) if part]
        if parts:
            detail = f"{detail}: {': '.join(parts)}"
        super().__init__(detail)

    @property
    def code(self) -> str:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message


class DecodeError(NewsAPIError):
    """Raised when a 200 response body does not match the expected model."""
