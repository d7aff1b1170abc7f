"""Single project lookup by project id on one contract."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from artblocks.subgraph.core.exceptions import QueryError
from artblocks.subgraph.models import Project
from artblocks.subgraph.runtime.graphql import QuerySpec, ResponseAdapter

from .shared import PROJECT_FIELDS, extract_projects

DOCUMENT = f"""
query getContractProject($id: ID!, $projectId: Int!) {{
  contract(id: $id) {{
    projects(where: {{ projectId: $projectId }}) {{{PROJECT_FIELDS}    }}
  }}
}}
"""


def build_variables(params: dict[str, Any]) -> dict[str, Any]:
    return {"id": params["contract_id"], "projectId": params["project_id"]}


SPEC = QuerySpec(
    id="contract_project",
    document=DOCUMENT,
    build_variables=build_variables,
)


class Adapter(ResponseAdapter):
    """Parse the lookup result into a list of zero or one projects.

    Only the first match is validated; the subgraph keeps project ids
    unique per contract, so anything after it is ignored.
    """

    def parse(self, data: dict[str, Any], params: dict[str, Any]) -> list[Project]:
        projects = extract_projects(data)
        if not projects:
            return []
        try:
            return [Project.model_validate(projects[0])]
        except PydanticValidationError as e:
            raise QueryError(f"Malformed project record: {e}") from e
