"""Core enumerations shared by queries and models."""

from enum import Enum


class CurationStatus(str, Enum):
    """Curation tier of an Art Blocks project.

    The subgraph stores the status as a plain string; the enum values match
    it exactly so they can be used as server-side filter literals.
    """

    CURATED = "curated"
    PLAYGROUND = "playground"
    FACTORY = "factory"
