"""Art Blocks subgraph query registry.

Each query module exports a ``SPEC`` and an ``Adapter``; this module maps
query ids onto them.
"""

from __future__ import annotations

from artblocks.subgraph.runtime.graphql import QuerySpec, ResponseAdapter

from .contract_factory_projects import SPEC as ContractFactoryProjectsSpec  # noqa: N811
from .contract_factory_projects import Adapter as ContractFactoryProjectsAdapter
from .contract_project import SPEC as ContractProjectSpec  # noqa: N811
from .contract_project import Adapter as ContractProjectAdapter
from .contract_projects_minimal import SPEC as ContractProjectsMinimalSpec  # noqa: N811
from .contract_projects_minimal import Adapter as ContractProjectsMinimalAdapter

_QUERY_REGISTRY: dict[str, tuple[QuerySpec, type[ResponseAdapter]]] = {
    "contract_projects_minimal": (ContractProjectsMinimalSpec, ContractProjectsMinimalAdapter),
    "contract_project": (ContractProjectSpec, ContractProjectAdapter),
    "contract_factory_projects": (ContractFactoryProjectsSpec, ContractFactoryProjectsAdapter),
}


def get_query_spec(query_id: str) -> QuerySpec | None:
    """Get query specification by ID.

    Args:
        query_id: Query identifier (e.g., "contract_project")

    Returns:
        QuerySpec if found, None otherwise
    """
    entry = _QUERY_REGISTRY.get(query_id)
    return entry[0] if entry else None


def get_query_adapter(query_id: str) -> type[ResponseAdapter] | None:
    """Get response adapter class by ID."""
    entry = _QUERY_REGISTRY.get(query_id)
    return entry[1] if entry else None


__all__ = [
    "get_query_adapter",
    "get_query_spec",
]
