"""
Error taxonomy for the headline service layer.

Each error carries two texts:
- message: user-facing, returned as {"error": message}
- detail: internal diagnosis, logged server-side only

main.py registers one exception handler for HeadlineServiceError, so routes
and services simply raise.
"""

from typing import Optional

from fastapi import status


class HeadlineServiceError(Exception):
    """Base class for errors that terminate a request with a JSON error body."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Something went wrong!"

    def __init__(self, message: Optional[str] = None, *, detail: Optional[str] = None):
        self.message = message or self.default_message
        self.detail = detail or self.message
        super().__init__(self.detail)


class InputValidationError(HeadlineServiceError):
    """A required request field is missing or empty."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "All fields are required"


class UpstreamError(HeadlineServiceError):
    """The completion API call failed (network, auth, quota, empty reply)."""

    default_message = "An error occurred while contacting the completion service. Please try again."


class NormalizationError(HeadlineServiceError):
    """The model reply has no usable JSON object or the wrong shape."""

    default_message = "Failed to parse headline analysis. Please clear your cache and try again."
