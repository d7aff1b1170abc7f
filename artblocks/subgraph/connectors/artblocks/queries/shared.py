"""Helpers shared by the contract query adapters."""

from __future__ import annotations

from typing import Any

from artblocks.subgraph.core.exceptions import QueryError

PROJECT_FIELDS = """
        projectId
        name
        invocations
        maxInvocations
        curationStatus
        contract {
          id
        }
"""


def extract_projects(data: Any) -> list[Any]:
    """Return ``data.contract.projects`` after presence checks.

    A null ``contract`` means the subgraph does not know the address; that
    is reported as an error, not as an empty result.
    """
    if not isinstance(data, dict):
        raise QueryError(f"Invalid response format: expected dict, got {type(data)}")

    contract = data.get("contract")
    if contract is None:
        raise QueryError("Subgraph response has no 'contract' entity")

    projects = contract.get("projects") if isinstance(contract, dict) else None
    if not isinstance(projects, list):
        raise QueryError("Subgraph response missing 'contract.projects' list")

    return projects
