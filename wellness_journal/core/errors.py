from typing import Any, Optional


class JournalError(Exception):
    """Base for errors that map onto an HTTP status and a client-facing message."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(JournalError):
    status_code = 400


class InvalidRequest(ValidationError):
    pass


class NotFoundError(JournalError):
    status_code = 404


class UpstreamUnavailable(JournalError):
    status_code = 502


class UpstreamNotConfigured(UpstreamUnavailable):
    status_code = 400


class UpstreamTimeout(UpstreamUnavailable):
    status_code = 504


class InternalError(JournalError):
    status_code = 500
