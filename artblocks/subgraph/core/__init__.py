"""Core components."""

from .enums import CurationStatus
from .exceptions import (
    PaginationError,
    QueryError,
    SubgraphError,
    TransportError,
    ValidationError,
)
from .outcome import EMPTY, Empty, Failure, FetchOutcome, Success

__all__ = [
    "CurationStatus",
    "EMPTY",
    "Empty",
    "Failure",
    "FetchOutcome",
    "PaginationError",
    "QueryError",
    "SubgraphError",
    "Success",
    "TransportError",
    "ValidationError",
]
