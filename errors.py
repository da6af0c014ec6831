# errors.py - error kinds raised while deciding an application
from typing import Optional

from schemas import ErrorResponse


class ApplicationRejected(Exception):
    """Base for failures reported back to the caller as HTTP 400."""

    def __init__(self, message: str, element_name: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.element_name = element_name

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(error_message=self.message, element_name=self.element_name)


class MissingElement(ApplicationRejected):
    def __init__(self, element_name: str):
        super().__init__("A required element is missing", element_name)


class InvalidRequest(ApplicationRejected):
    def __init__(self, message: str):
        super().__init__(message)


class MalformedInput(ApplicationRejected):
    """The body is not JSON, or does not fit the application shape."""

    def __init__(self, detail: str):
        super().__init__("The request body is not a valid insurance application")
        self.detail = detail


class TranslationUnavailable(Exception):
    """Any failure of the outbound translation call."""
