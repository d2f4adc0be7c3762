"""Custom exceptions for the PubChem client."""
from typing import Optional, Sequence


class PubChemClientError(Exception):
    """Base exception for PubChem client errors."""
    pass


class TransportError(PubChemClientError):
    """Raised when a request could not be sent or its response not received."""

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        super().__init__(message)


class ParseError(PubChemClientError):
    """Raised when a response body is not valid JSON."""
    pass


class ShapeError(PubChemClientError):
    """Raised when an expected key or index is missing from a response."""

    def __init__(self, message: str, path: Sequence = ()):
        self.path = tuple(path)
        super().__init__(message)


class ValidationError(PubChemClientError, ValueError):
    """Raised when a query is rejected before any request is made."""
    pass
