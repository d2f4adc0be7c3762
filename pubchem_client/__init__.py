"""Rate-limited client for PubChem compound lookups."""

from .client import PubChemClient
from .exceptions import (
    PubChemClientError,
    TransportError,
    ParseError,
    ShapeError,
    ValidationError,
)
from .models import CompoundRecord, FormulaSearchResult

__all__ = [
    "PubChemClient",
    "PubChemClientError",
    "TransportError",
    "ParseError",
    "ShapeError",
    "ValidationError",
    "CompoundRecord",
    "FormulaSearchResult",
]
