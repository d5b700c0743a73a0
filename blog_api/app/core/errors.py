"""
Error hierarchy for the Blog API.

Every error carries a human readable ``message`` and the HTTP status
code it maps to.  ``to_response`` produces the JSON body returned to
clients, which is always of the form ``{"error": message}``.
"""

from typing import Dict, Optional


class BlogApiError(Exception):
    """Base class for all errors surfaced through the HTTP layer."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_response(self) -> Dict[str, str]:
        return {"error": self.message}


class ValidationError(BlogApiError):
    """A required field is missing from a request body."""

    status_code = 400
    default_message = "Invalid request"


class NotFoundError(BlogApiError):
    """No blog exists with the requested identifier."""

    status_code = 404
    default_message = "Blog not found"
