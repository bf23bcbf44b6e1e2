"""Custom exception hierarchy for the application.

Transport failures from ``requests`` are not part of this hierarchy; they
propagate to the caller unchanged.
"""


class AppError(Exception):
    """Base exception for the application."""

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code


class UpstreamStatusError(AppError):
    """Raised when an upstream service answers with anything other than HTTP 200."""

    def __init__(self, step: str, status_code: int, body: str) -> None:
        super().__init__(
            f"Status Code {status_code} when fetching {step}: {body}",
            code="UPSTREAM_STATUS",
        )
        self.step = step
        self.status_code = status_code
        self.body = body


class MalformedResponseError(AppError):
    """Raised when an upstream body is not JSON or lacks a required field."""

    def __init__(self, step: str, message: str) -> None:
        super().__init__(
            f"Malformed response when fetching {step}: {message}",
            code="MALFORMED_RESPONSE",
        )
        self.step = step
