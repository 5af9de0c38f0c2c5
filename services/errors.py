from __future__ import annotations


class LookupFailure(Exception):
    """Base for failures that end a lookup with a user-facing message."""

    status_code: int = 500
    public_message: str = "An internal server error occurred. Please try again later."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.public_message)
        self.public_message = message or self.public_message


class InputValidationError(LookupFailure):
    status_code = 400
    public_message = "Please provide a valid email address."


class NoMatchFound(LookupFailure):
    status_code = 404
    public_message = "No LinkedIn profile found for this email."


class SourceUnavailable(Exception):
    """An identity source or search backend could not answer; treated as no data."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason
