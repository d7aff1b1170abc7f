"""Unit tests for the Project model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from artblocks.subgraph.core import CurationStatus
from artblocks.subgraph.models import ContractRef, Project


def _wire_project(**overrides):
    data = {
        "projectId": "42",
        "name": "Chromie Squiggle",
        "invocations": "9998",
        "maxInvocations": "10000",
        "curationStatus": "curated",
        "contract": {"id": "0x059EDD72CD353DF5106D2B9CC5AB83A52287AC3A"},
    }
    data.update(overrides)
    return data


class TestProject:
    """Test Project validation and derived properties."""

    def test_validates_wire_format(self):
        """Subgraph BigInt strings and camelCase names are accepted."""
        project = Project.model_validate(_wire_project())
        assert project.project_id == 42
        assert project.invocations == 9998
        assert project.max_invocations == 10000
        assert project.curation_status == "curated"
        assert project.contract.id == "0x059edd72cd353df5106d2b9cc5ab83a52287ac3a"

    def test_accepts_field_names(self):
        project = Project(
            project_id=1,
            name="Fidenza",
            invocations=999,
            max_invocations=999,
            curation_status=CurationStatus.CURATED.value,
            contract=ContractRef(id="0xabc"),
        )
        assert project.is_complete
        assert project.remaining_invocations == 0

    def test_remaining_invocations(self):
        project = Project.model_validate(_wire_project())
        assert project.remaining_invocations == 2
        assert not project.is_complete

    def test_frozen(self):
        project = Project.model_validate(_wire_project())
        with pytest.raises(ValidationError):
            project.name = "changed"

    def test_missing_field_rejected(self):
        data = _wire_project()
        del data["maxInvocations"]
        with pytest.raises(ValidationError):
            Project.model_validate(data)

    def test_negative_invocations_rejected(self):
        with pytest.raises(ValidationError):
            Project.model_validate(_wire_project(invocations=-1))


class TestCurationStatus:
    """Test CurationStatus values."""

    def test_factory_literal(self):
        assert CurationStatus.FACTORY.value == "factory"
