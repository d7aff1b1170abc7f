"""Data models for subgraph query results.

All models are immutable pydantic v2 models (frozen=True). They are only
ever built from query results, never assembled by hand in library code.
"""

from .project import ContractRef, Project

__all__ = [
    "ContractRef",
    "Project",
]
