"""Page execution logic for offset-paginated queries.

This module provides the PageExecutor class that walks a paged result set
one page at a time, advancing ``skip`` by the size of each returned page,
and either counts or collects the items it sees.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from time import perf_counter
from typing import Any

from ...core.exceptions import PaginationError
from .definitions import PagePolicy, PageRequest, PageResult
from .telemetry import log_page_completed, log_page_error, log_pagination_complete

FetchPage = Callable[[PageRequest], Awaitable[list[Any]]]


class PageExecutor:
    """Pages through a result set until the source returns a short page.

    The executor issues requests strictly in sequence for one contract:
    each request's ``skip`` depends on the previous page's length.
    """

    def __init__(self, policy: PagePolicy | None = None, *, query_id: str = "unknown") -> None:
        """Initialize page executor.

        Args:
            policy: Pagination policy (page size and page budget)
            query_id: Query identifier used in telemetry
        """
        self._policy = policy or PagePolicy()
        self._query_id = query_id

    async def count(self, contract_id: str, fetch_page: FetchPage) -> PageResult:
        """Count items across all pages without retaining them."""
        return await self._run(contract_id, fetch_page, keep_items=False)

    async def collect(self, contract_id: str, fetch_page: FetchPage) -> PageResult:
        """Collect items across all pages in arrival order."""
        return await self._run(contract_id, fetch_page, keep_items=True)

    async def _run(self, contract_id: str, fetch_page: FetchPage, *, keep_items: bool) -> PageResult:
        page_size = self._policy.page_size
        result = PageResult(contract_id=contract_id)
        start = perf_counter()

        for page_index in range(self._policy.max_pages):
            request = PageRequest(
                contract_id=contract_id,
                first=page_size,
                skip=result.total_items,
                page_index=page_index,
            )
            page_start = perf_counter()
            try:
                page = await fetch_page(request)
            except Exception as e:
                log_page_error(
                    query_id=self._query_id,
                    contract_id=contract_id,
                    page_index=page_index,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise

            result.pages_used += 1
            result.total_items += len(page)
            if keep_items:
                result.items.extend(page)

            log_page_completed(
                query_id=self._query_id,
                contract_id=contract_id,
                page_index=page_index,
                skip=request.skip,
                rows=len(page),
                latency_ms=(perf_counter() - page_start) * 1000.0,
            )

            # A page that is not exactly full is the end-of-data signal
            if len(page) != page_size:
                log_pagination_complete(
                    query_id=self._query_id,
                    result=result,
                    total_latency_ms=(perf_counter() - start) * 1000.0,
                )
                return result

        raise PaginationError(
            f"Pagination for contract {contract_id} did not finish within "
            f"{self._policy.max_pages} pages",
            contract_id=contract_id,
            pages_used=result.pages_used,
        )
