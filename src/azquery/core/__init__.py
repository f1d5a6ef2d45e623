"""Core types and exceptions."""

from .exceptions import (
    AzqueryError,
    SearchError,
    SearchServiceError,
    SearchServiceUnavailableError,
    ValidationError,
)
from .types import Combiner, Comparison, Direction

__all__ = [
    # Exceptions
    "AzqueryError",
    "SearchError",
    "SearchServiceError",
    "SearchServiceUnavailableError",
    "ValidationError",
    # Types
    "Combiner",
    "Comparison",
    "Direction",
]
