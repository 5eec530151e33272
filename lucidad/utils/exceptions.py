"""Error kinds surfaced by the analyze route.

Every error carries the HTTP status the route answers with and the payload
that is safe to put in the response body.
"""
from typing import Any

INVALID_IMAGE_MESSAGE = "Invalid image. Send a data URL (base64) captured from camera or upload."
UNEXPECTED_ERROR_MESSAGE = "Unexpected server error"


class LucidAdError(Exception):
    """Base class for errors with a client-facing payload."""
    status_code = 500

    def __init__(self, message: str = UNEXPECTED_ERROR_MESSAGE):
        self.message = message
        super().__init__(message)

    @property
    def payload(self) -> Any:
        return self.message


class InvalidImageError(LucidAdError):
    status_code = 400

    def __init__(self, message: str = INVALID_IMAGE_MESSAGE):
        super().__init__(message)


class ResultValidationError(LucidAdError):
    """The model returned JSON that does not fit the result schema."""
    status_code = 422

    def __init__(self, errors: list[dict[str, str]]):
        self.errors = errors
        fields = ", ".join(e["field"] for e in errors)
        super().__init__(f"Result failed validation: {fields}")

    @property
    def payload(self) -> list[dict[str, str]]:
        return self.errors


class ResponseParseError(LucidAdError):
    status_code = 500

    def __init__(self, message: str = "Failed to parse model response as JSON"):
        super().__init__(message)
