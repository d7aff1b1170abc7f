"""Fan-out of one per-contract operation across a contract list.

The aggregator launches the operation for every contract at once and
reconciles the settled outcomes with one of three policies:

- ``sum_counts``: add up integer counts, any failure voids the sum
- ``first_match``: pick the first hit in contract order
- ``concatenate``: join per-contract lists in contract order, any failure
  voids the result

Ordering of the reconciled value always follows the contract list, never
the order in which requests happen to settle.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from time import perf_counter
from typing import Any

from ..core.outcome import EMPTY, Empty, Failure, FetchOutcome, Success
from .pagination.telemetry import log_contract_failed, log_fanout_complete

logger = logging.getLogger(__name__)

ContractOperation = Callable[[str], Awaitable[FetchOutcome]]


class FanOutAggregator:
    """Runs a per-contract operation concurrently over a fixed contract list."""

    def __init__(self, contracts: Iterable[str]) -> None:
        self._contracts = tuple(contracts)

    async def settle(self, op: ContractOperation, *, operation: str = "fanout") -> list[FetchOutcome]:
        """Run ``op`` for every contract and wait for all of them to settle.

        Every request is issued before any is awaited. Exceptions escaping
        ``op`` are logged and turned into ``Failure`` for that contract only.

        Returns:
            One outcome per contract, in contract order
        """
        start = perf_counter()

        async def _guarded(contract_id: str) -> FetchOutcome:
            try:
                return await op(contract_id)
            except Exception as e:
                log_contract_failed(
                    operation=operation,
                    contract_id=contract_id,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                return Failure(e, contract_id=contract_id)

        outcomes = list(await asyncio.gather(*(_guarded(c) for c in self._contracts)))

        log_fanout_complete(
            operation=operation,
            contracts=len(self._contracts),
            succeeded=sum(isinstance(o, Success) for o in outcomes),
            empty=sum(isinstance(o, Empty) for o in outcomes),
            failed=sum(isinstance(o, Failure) for o in outcomes),
            total_latency_ms=(perf_counter() - start) * 1000.0,
        )
        return outcomes

    async def sum_counts(
        self, op: ContractOperation, *, operation: str = "sum_counts"
    ) -> FetchOutcome:
        """Sum per-contract counts.

        An empty contract list sums to 0. A single failing contract makes
        the whole sum a ``Failure``; no partial sum is returned.
        """
        outcomes = await self.settle(op, operation=operation)
        failure = _first_failure(outcomes)
        if failure is not None:
            return failure
        return Success(sum(o.value for o in outcomes if isinstance(o, Success)))

    async def first_match(
        self, op: ContractOperation, *, operation: str = "first_match"
    ) -> FetchOutcome:
        """Select the first ``Success`` in contract order.

        Without a match the result is ``Empty`` as long as at least one
        contract answered; failed contracts are treated as "not here".
        Only when every contract failed does the result become a
        ``Failure``.
        """
        outcomes = await self.settle(op, operation=operation)
        for outcome in outcomes:
            if isinstance(outcome, Success):
                return outcome
        if outcomes and all(isinstance(o, Failure) for o in outcomes):
            return outcomes[0]
        return EMPTY

    async def concatenate(
        self, op: ContractOperation, *, operation: str = "concatenate"
    ) -> FetchOutcome:
        """Concatenate per-contract lists in contract order.

        Each contract's list stays contiguous and keeps its own order. Any
        failing contract makes the whole result a ``Failure``.
        """
        outcomes = await self.settle(op, operation=operation)
        failure = _first_failure(outcomes)
        if failure is not None:
            return failure
        combined: list[Any] = []
        for outcome in outcomes:
            if isinstance(outcome, Success):
                combined.extend(outcome.value)
        return Success(combined)


def _first_failure(outcomes: list[FetchOutcome]) -> Failure | None:
    for outcome in outcomes:
        if isinstance(outcome, Failure):
            logger.debug(
                "aggregate_voided",
                extra={"contract_id": outcome.contract_id},
            )
            return outcome
    return None
