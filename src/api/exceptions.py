"""Custom exceptions for the API."""

from typing import Optional

from .models import ErrorResponse


class APIException(Exception):
    """Base exception for API errors, carrying the response to render."""

    def __init__(self, response: Optional[ErrorResponse] = None):
        self.response = response if response is not None else ErrorResponse()
        super().__init__(str(self.response.error))
