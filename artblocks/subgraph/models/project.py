"""Art Blocks project data model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ContractRef(BaseModel):
    """Reference to the core contract a project lives on."""

    id: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_validator("id")
    @classmethod
    def _lowercase_address(cls, v: str) -> str:
        return v.lower()


class Project(BaseModel):
    """Project metadata as returned by the subgraph.

    Field aliases match the subgraph's camelCase names so query results can
    be validated directly; snake_case names are accepted too.
    """

    project_id: int = Field(..., ge=0, alias="projectId")
    name: str
    invocations: int = Field(..., ge=0)
    max_invocations: int = Field(..., ge=0, alias="maxInvocations")
    curation_status: str = Field(..., alias="curationStatus")
    contract: ContractRef

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def remaining_invocations(self) -> int:
        """Mints left before the project reaches its cap."""
        return max(self.max_invocations - self.invocations, 0)

    @property
    def is_complete(self) -> bool:
        """True when the project is fully minted."""
        return self.invocations >= self.max_invocations
