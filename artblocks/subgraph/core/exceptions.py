"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class SubgraphError(Exception):
    """Base exception for all library errors."""

    pass


class TransportError(SubgraphError):
    """Request to the subgraph endpoint failed.

    Raised for connection problems, timeouts and non-2xx HTTP responses.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class QueryError(SubgraphError):
    """Subgraph answered, but the payload is unusable.

    Covers GraphQL ``errors`` arrays, a missing ``data`` object and result
    shapes that fail the presence checks in the query adapters.
    """

    def __init__(self, message: str, errors: list[Any] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class PaginationError(SubgraphError):
    """Pagination did not terminate within the configured page budget."""

    def __init__(self, message: str, contract_id: str, pages_used: int) -> None:
        super().__init__(message)
        self.contract_id = contract_id
        self.pages_used = pages_used


class ValidationError(SubgraphError):
    """Data validation failure."""

    pass
