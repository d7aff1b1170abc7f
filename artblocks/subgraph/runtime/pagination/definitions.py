"""Pagination policy and page bookkeeping structures.

Pagination is offset based: each request asks for ``page_size`` items
starting at ``skip``, and a page shorter than ``page_size`` marks the end of
the data. The source exposes no "has next page" flag.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class PagePolicy:
    """Pagination policy for a paged query.

    Attributes:
        page_size: Items requested per page (the subgraph caps ``first`` at 1000)
        max_pages: Upper bound on pages fetched for one contract
    """

    page_size: int = 1000
    max_pages: int = 100

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise ValueError("page_size must be positive")
        if self.max_pages <= 0:
            raise ValueError("max_pages must be positive")


@dataclass(frozen=True)
class PageRequest:
    """Request for a single page.

    Attributes:
        contract_id: Contract the page belongs to
        first: Number of items requested
        skip: Offset of the first item
        page_index: Zero-based index of this page in the sequence
    """

    contract_id: str
    first: int
    skip: int = 0
    page_index: int = 0


@dataclass
class PageResult:
    """Result of a paginated fetch.

    Attributes:
        contract_id: Contract that was paged through
        items: Collected items in arrival order (empty in counting mode)
        pages_used: Number of page requests issued
        total_items: Number of items seen across all pages
    """

    contract_id: str
    items: list[Any] = field(default_factory=list)
    pages_used: int = 0
    total_items: int = 0
