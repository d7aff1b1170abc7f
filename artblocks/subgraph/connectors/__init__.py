"""Subgraph connectors."""

from .artblocks import ArtBlocksSubgraphClient, ContractRegistry

__all__ = [
    "ArtBlocksSubgraphClient",
    "ContractRegistry",
]
