"""Art Blocks Subgraph - paginated project metadata client for Art Blocks contracts."""

from .connectors.artblocks import API_URL, ArtBlocksSubgraphClient, ContractRegistry
from .core import (
    EMPTY,
    CurationStatus,
    Empty,
    Failure,
    FetchOutcome,
    PaginationError,
    QueryError,
    SubgraphError,
    Success,
    TransportError,
    ValidationError,
)
from .models import ContractRef, Project
from .runtime import FanOutAggregator, GraphQLTransport, PageExecutor, PagePolicy

__version__ = "0.1.0"

__all__ = [
    "API_URL",
    "ArtBlocksSubgraphClient",
    "ContractRef",
    "ContractRegistry",
    "CurationStatus",
    "EMPTY",
    "Empty",
    "Failure",
    "FanOutAggregator",
    "FetchOutcome",
    "GraphQLTransport",
    "PageExecutor",
    "PagePolicy",
    "PaginationError",
    "Project",
    "QueryError",
    "SubgraphError",
    "Success",
    "TransportError",
    "ValidationError",
]
