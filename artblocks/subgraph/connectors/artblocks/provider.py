"""Art Blocks subgraph client.

This client answers project questions across the Art Blocks core contracts:
how many projects exist, which project has a given number, and which
projects are in the factory tier.

Architecture:
    Per-contract operations page through the subgraph with PageExecutor and
    report a FetchOutcome. Cross-contract operations hand those per-contract
    operations to FanOutAggregator, which issues them concurrently and
    reconciles the outcomes. The GraphQL transport is injected, so tests and
    callers control the network layer.
"""

from __future__ import annotations

import logging
from typing import Any

from artblocks.subgraph.core.outcome import EMPTY, Failure, FetchOutcome, Success
from artblocks.subgraph.models import Project
from artblocks.subgraph.runtime.fanout import FanOutAggregator
from artblocks.subgraph.runtime.graphql import (
    GraphQLTransport,
    QueryExecutor,
    QueryRunner,
)
from artblocks.subgraph.runtime.pagination import (
    PageExecutor,
    PagePolicy,
    PageRequest,
)
from artblocks.subgraph.runtime.pagination.telemetry import log_contract_failed

from .config import API_URL, DEFAULT_TIMEOUT, MAX_PAGES_PER_CONTRACT, MAX_PROJECTS_PER_QUERY
from .queries import get_query_adapter, get_query_spec
from .registry import ContractRegistry

logger = logging.getLogger(__name__)


class ArtBlocksSubgraphClient:
    """Client for project metadata on the Art Blocks core contracts.

    Every public method resolves to a FetchOutcome and never raises for a
    data-source failure:

    - ``Success(value)``: the answer
    - ``Empty``: the lookup succeeded and nothing matched
    - ``Failure(error)``: the answer could not be produced
    """

    def __init__(
        self,
        transport: GraphQLTransport | QueryExecutor | None = None,
        *,
        registry: ContractRegistry | None = None,
        policy: PagePolicy | None = None,
        api_url: str = API_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the client.

        Args:
            transport: GraphQL transport to use. When omitted, the client
                creates a GraphQLTransport for ``api_url`` and owns it.
            registry: Contracts to fan out over (defaults to the packaged
                core contract list)
            policy: Pagination policy (defaults to 1000 per page)
            api_url: Subgraph endpoint, used only when creating a transport
            timeout: HTTP timeout in seconds, used only when creating a transport
        """
        self._owns_transport = transport is None
        self._transport = transport or GraphQLTransport(api_url, timeout=timeout)
        self._runner = QueryRunner(self._transport)
        self._registry = registry if registry is not None else ContractRegistry.default()
        self._policy = policy or PagePolicy(
            page_size=MAX_PROJECTS_PER_QUERY, max_pages=MAX_PAGES_PER_CONTRACT
        )

    @property
    def registry(self) -> ContractRegistry:
        return self._registry

    async def _fetch(self, query_id: str, params: dict[str, Any]) -> Any:
        spec = get_query_spec(query_id)
        if spec is None:
            raise ValueError(f"Unknown subgraph query: {query_id}")

        adapter_cls = get_query_adapter(query_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for query: {query_id}")

        logger.debug("Running subgraph query", extra={"query_id": query_id, **params})
        return await self._runner.run(spec=spec, adapter=adapter_cls(), params=params)

    def _page_fetcher(self, query_id: str):
        async def fetch_page(request: PageRequest) -> list[Any]:
            return await self._fetch(
                query_id,
                {"contract_id": request.contract_id, "first": request.first, "skip": request.skip},
            )

        return fetch_page

    # --- per-contract operations ---------------------------------------

    async def count_contract_projects(self, contract_id: str) -> FetchOutcome:
        """Count every project on one contract (paged)."""
        contract_id = _normalize_contract_id(contract_id)
        executor = PageExecutor(self._policy, query_id="contract_projects_minimal")
        try:
            result = await executor.count(
                contract_id, self._page_fetcher("contract_projects_minimal")
            )
        except Exception as e:
            return _failed("count_contract_projects", contract_id, e)
        return Success(result.total_items)

    async def get_contract_project(self, project_id: int, contract_id: str) -> FetchOutcome:
        """Look up one project on one contract.

        Returns ``Empty`` when the contract has no project with that number.
        """
        project_id = _validate_project_id(project_id)
        contract_id = _normalize_contract_id(contract_id)
        try:
            projects: list[Project] = await self._fetch(
                "contract_project", {"contract_id": contract_id, "project_id": project_id}
            )
        except Exception as e:
            return _failed("get_contract_project", contract_id, e)
        return Success(projects[0]) if projects else EMPTY

    async def get_contract_factory_projects(self, contract_id: str) -> FetchOutcome:
        """Collect every factory project on one contract (paged)."""
        contract_id = _normalize_contract_id(contract_id)
        executor = PageExecutor(self._policy, query_id="contract_factory_projects")
        try:
            result = await executor.collect(
                contract_id, self._page_fetcher("contract_factory_projects")
            )
        except Exception as e:
            return _failed("get_contract_factory_projects", contract_id, e)
        return Success(result.items)

    # --- cross-contract operations -------------------------------------

    async def count_all_projects(self) -> FetchOutcome:
        """Total number of projects across all registry contracts."""
        aggregator = FanOutAggregator(self._registry)
        return await aggregator.sum_counts(
            self.count_contract_projects, operation="count_all_projects"
        )

    async def get_project_by_id(self, project_id: int, contract_id: str | None = None) -> FetchOutcome:
        """Find a project by number.

        Args:
            project_id: Project number
            contract_id: Contract to query directly. When omitted, every
                registry contract is searched and the first one (in registry
                order) holding the project wins.
        """
        if contract_id:
            return await self.get_contract_project(project_id, contract_id)

        project_id = _validate_project_id(project_id)
        aggregator = FanOutAggregator(self._registry)

        async def lookup(cid: str) -> FetchOutcome:
            return await self.get_contract_project(project_id, cid)

        return await aggregator.first_match(lookup, operation="get_project_by_id")

    async def get_all_factory_projects(self) -> FetchOutcome:
        """Every factory project across all registry contracts, in registry order."""
        aggregator = FanOutAggregator(self._registry)
        return await aggregator.concatenate(
            self.get_contract_factory_projects, operation="get_all_factory_projects"
        )

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            await self._transport.close()

    async def __aenter__(self) -> ArtBlocksSubgraphClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


def _failed(operation: str, contract_id: str, error: Exception) -> Failure:
    log_contract_failed(
        operation=operation,
        contract_id=contract_id,
        error_type=type(error).__name__,
        error_message=str(error),
    )
    return Failure(error, contract_id=contract_id)


def _validate_project_id(project_id: int) -> int:
    if isinstance(project_id, bool) or not isinstance(project_id, int):
        raise ValueError(f"project_id must be an integer, got {project_id!r}")
    if project_id < 0:
        raise ValueError(f"project_id must be non-negative, got {project_id}")
    return project_id


def _normalize_contract_id(contract_id: str) -> str:
    if not isinstance(contract_id, str) or not contract_id.strip():
        raise ValueError("contract_id must be a non-empty string")
    return contract_id.strip().lower()
