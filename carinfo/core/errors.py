"""
Purpose:
- Error taxonomy for the relay. Each error knows the HTTP status and the
  message the caller sees in the `{"error": ...}` body.
"""

from __future__ import annotations

GENERIC_ERROR_MESSAGE = "An unexpected error occurred on the server."
UPSTREAM_ERROR_MESSAGE = "A server error occurred at Google's API. Please retry later."
MISSING_IMAGE_MESSAGE = "No image file provided"

class RelayError(Exception):
    status_code: int = 500
    message: str = GENERIC_ERROR_MESSAGE

    def __init__(self, message: str | None = None, detail: str | None = None):
        if message is not None:
            self.message = message
        # detail is for server logs only, never sent to the caller
        self.detail = detail
        super().__init__(detail or self.message)

class MissingImageError(RelayError):
    status_code = 400
    message = MISSING_IMAGE_MESSAGE

class VehicleNotFoundError(RelayError):
    """The model looked at the image and reported no vehicle."""
    status_code = 400

class UpstreamServiceError(RelayError):
    """Gemini could not be reached or answered with a non-2xx status."""
    status_code = 500
    message = UPSTREAM_ERROR_MESSAGE

class GeminiResponseError(RelayError):
    """Gemini answered but the reply carries no usable text (e.g. blocked prompt)."""
    status_code = 500

class ReplyFormatError(RelayError):
    """Reply text parsed but matches neither the vehicle nor the error shape."""
    status_code = 500
