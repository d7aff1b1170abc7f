"""Paged listing of factory projects on one contract."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from artblocks.subgraph.core.exceptions import QueryError
from artblocks.subgraph.models import Project
from artblocks.subgraph.runtime.graphql import QuerySpec, ResponseAdapter

from ..config import FACTORY_CURATION_STATUS
from .shared import PROJECT_FIELDS, extract_projects

DOCUMENT = f"""
query getContractFactoryProjects($id: ID!, $first: Int!, $skip: Int) {{
  contract(id: $id) {{
    projects(
      where: {{ curationStatus: "{FACTORY_CURATION_STATUS}" }}
      first: $first
      skip: $skip
      orderBy: projectId
    ) {{{PROJECT_FIELDS}    }}
  }}
}}
"""


def build_variables(params: dict[str, Any]) -> dict[str, Any]:
    return {"id": params["contract_id"], "first": params["first"], "skip": params.get("skip", 0)}


SPEC = QuerySpec(
    id="contract_factory_projects",
    document=DOCUMENT,
    build_variables=build_variables,
)


class Adapter(ResponseAdapter):
    """Parse a factory page into Project models, preserving order."""

    def parse(self, data: dict[str, Any], params: dict[str, Any]) -> list[Project]:
        try:
            return [Project.model_validate(item) for item in extract_projects(data)]
        except PydanticValidationError as e:
            raise QueryError(f"Malformed project record: {e}") from e
