"""Minimal project listing for one contract, used for counting."""

from __future__ import annotations

from typing import Any

from artblocks.subgraph.core.exceptions import QueryError
from artblocks.subgraph.runtime.graphql import QuerySpec, ResponseAdapter

from .shared import extract_projects

DOCUMENT = """
query getContractProjectsMinimal($id: ID!, $first: Int!, $skip: Int) {
  contract(id: $id) {
    projects(first: $first, skip: $skip, orderBy: projectId) {
      projectId
    }
  }
}
"""


def build_variables(params: dict[str, Any]) -> dict[str, Any]:
    return {"id": params["contract_id"], "first": params["first"], "skip": params.get("skip", 0)}


SPEC = QuerySpec(
    id="contract_projects_minimal",
    document=DOCUMENT,
    build_variables=build_variables,
)


class Adapter(ResponseAdapter):
    """Parse a minimal page into a list of project ids."""

    def parse(self, data: dict[str, Any], params: dict[str, Any]) -> list[int]:
        ids: list[int] = []
        for item in extract_projects(data):
            try:
                ids.append(int(item["projectId"]))
            except (KeyError, TypeError, ValueError) as e:
                raise QueryError(f"Malformed project stub: {item!r}") from e
        return ids
