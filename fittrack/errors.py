# fittrack/errors.py
from typing import Any


class AppError(Exception):
    status_code = 500
    message = "Internal Server Error"

    def __init__(self, message: str | None = None, details: Any = None):
        super().__init__(message or self.message)
        self.message = message or self.message
        self.details = details

    def to_body(self) -> dict:
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(AppError):
    """Malformed request."""
    status_code = 400
    message = "Invalid request"


class AuthError(AppError):
    """Bad or missing credential for an upstream service."""
    status_code = 401
    message = "Authentication failed"


class NotFoundError(AppError):
    status_code = 404
    message = "Not found"


class RateLimitError(AppError):
    status_code = 429
    message = "Rate limit exceeded. Please wait a moment."


class ConfigError(AppError):
    """A server-side secret is missing."""
    status_code = 500
    message = "Server is not configured"


class UpstreamError(AppError):
    status_code = 500
    message = "Upstream request failed"


class UpstreamTimeoutError(AppError):
    status_code = 504
    message = "Request timeout. Try again."
