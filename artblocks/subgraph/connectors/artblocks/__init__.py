"""Art Blocks subgraph connector."""

from .config import API_URL, MAX_PROJECTS_PER_QUERY
from .provider import ArtBlocksSubgraphClient
from .registry import ContractRegistry

__all__ = [
    "API_URL",
    "ArtBlocksSubgraphClient",
    "ContractRegistry",
    "MAX_PROJECTS_PER_QUERY",
]
