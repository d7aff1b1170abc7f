"""Offset pagination layer.

Architecture:
    - definitions.py: Page policy and bookkeeping structures
    - executors.py: Page loop (counting and collecting modes)
    - telemetry.py: Structured logging for pages and fan-out
"""

from __future__ import annotations

from .definitions import PagePolicy, PageRequest, PageResult
from .executors import FetchPage, PageExecutor

__all__ = [
    "FetchPage",
    "PageExecutor",
    "PagePolicy",
    "PageRequest",
    "PageResult",
]
