"""Structured logging for pagination and fan-out operations."""

from __future__ import annotations

import logging

from .definitions import PageResult

logger = logging.getLogger(__name__)


def log_page_completed(
    *,
    query_id: str,
    contract_id: str,
    page_index: int,
    skip: int,
    rows: int,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single page.

    Args:
        query_id: Query identifier
        contract_id: Contract the page was fetched for
        page_index: Zero-based index of the page
        skip: Offset the page was requested at
        rows: Number of items the page returned
        latency_ms: Latency in milliseconds (optional)
    """
    logger.info(
        "page_completed",
        extra={
            "query_id": query_id,
            "contract_id": contract_id,
            "page_index": page_index,
            "skip": skip,
            "rows": rows,
            "latency_ms": latency_ms,
        },
    )


def log_pagination_complete(
    *,
    query_id: str,
    result: PageResult,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of a full pagination sequence."""
    logger.info(
        "pagination_complete",
        extra={
            "query_id": query_id,
            "contract_id": result.contract_id,
            "pages_used": result.pages_used,
            "total_items": result.total_items,
            "total_latency_ms": total_latency_ms,
        },
    )


def log_page_error(
    *,
    query_id: str,
    contract_id: str,
    page_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a page fetch error.

    Args:
        query_id: Query identifier
        contract_id: Contract the failing page belonged to
        page_index: Zero-based index of the page that failed
        error_type: Exception class name (e.g., "TransportError")
        error_message: Error message
    """
    logger.error(
        "page_error",
        extra={
            "query_id": query_id,
            "contract_id": contract_id,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_contract_failed(
    *,
    operation: str,
    contract_id: str,
    error_type: str,
    error_message: str,
) -> None:
    """Log a contract-level fetch that resolved to a failure."""
    logger.error(
        "contract_fetch_failed",
        extra={
            "operation": operation,
            "contract_id": contract_id,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_fanout_complete(
    *,
    operation: str,
    contracts: int,
    succeeded: int,
    empty: int,
    failed: int,
    total_latency_ms: float | None = None,
) -> None:
    """Log reconciliation of a fan-out across contracts."""
    logger.info(
        "fanout_complete",
        extra={
            "operation": operation,
            "contracts": contracts,
            "succeeded": succeeded,
            "empty": empty,
            "failed": failed,
            "total_latency_ms": total_latency_ms,
        },
    )
