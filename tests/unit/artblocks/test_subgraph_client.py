"""Unit tests for ArtBlocksSubgraphClient against an in-memory subgraph."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import pytest

from artblocks.subgraph import (
    ArtBlocksSubgraphClient,
    ContractRegistry,
    Empty,
    Failure,
    GraphQLTransport,
    PagePolicy,
    Project,
    QueryError,
    Success,
    TransportError,
)


def _project(project_id: int, contract_id: str, status: str = "curated") -> dict:
    return {
        "projectId": str(project_id),
        "name": f"Project {project_id}",
        "invocations": "1",
        "maxInvocations": "10",
        "curationStatus": status,
        "contract": {"id": contract_id},
    }


class FakeSubgraph:
    """In-memory stand-in for the GraphQL transport.

    Serves ``contract.projects`` for each contract with real first/skip and
    where-filter semantics, and records every call.
    """

    def __init__(self, projects: dict[str, list[dict]], failing: set[str] | None = None) -> None:
        self.projects = projects
        self.failing = failing or set()
        self.calls: list[tuple[str, dict]] = []

    async def execute(self, document: str, variables: dict) -> dict:
        query_name = document.split("(", 1)[0].split()[-1]
        self.calls.append((query_name, dict(variables)))
        contract_id = variables["id"]
        if contract_id in self.failing:
            raise TransportError(f"{contract_id} unavailable", status_code=502)
        if contract_id not in self.projects:
            return {"contract": None}

        rows = self.projects[contract_id]
        if query_name == "getContractProject":
            rows = [p for p in rows if int(p["projectId"]) == variables["projectId"]]
            return {"contract": {"projects": rows}}
        if query_name == "getContractFactoryProjects":
            rows = [p for p in rows if p["curationStatus"] == "factory"]
        skip, first = variables.get("skip") or 0, variables["first"]
        page = rows[skip : skip + first]
        if query_name == "getContractProjectsMinimal":
            page = [{"projectId": p["projectId"]} for p in page]
        return {"contract": {"projects": page}}

    def calls_for(self, query_name: str) -> list[dict]:
        return [v for name, v in self.calls if name == query_name]


def _client(subgraph: FakeSubgraph, contracts: list[str], page_size: int = 1000):
    registry = ContractRegistry.from_mapping({f"c{i}": c for i, c in enumerate(contracts)})
    return ArtBlocksSubgraphClient(
        subgraph, registry=registry, policy=PagePolicy(page_size=page_size, max_pages=50)
    )


class TestCountProjects:
    """Test project counting across contracts."""

    @pytest.mark.asyncio
    async def test_count_contract_projects_pages(self):
        """2400 projects at 1000 per page take three requests."""
        subgraph = FakeSubgraph({"0xa": [_project(i, "0xa") for i in range(2400)]})
        client = _client(subgraph, ["0xa"])

        outcome = await client.count_contract_projects("0xa")

        assert outcome == Success(2400)
        calls = subgraph.calls_for("getContractProjectsMinimal")
        assert [c["skip"] for c in calls] == [0, 1000, 2000]
        assert all(c["first"] == 1000 for c in calls)

    @pytest.mark.asyncio
    async def test_count_all_projects_sums(self):
        subgraph = FakeSubgraph(
            {
                "0xa": [_project(i, "0xa") for i in range(5)],
                "0xb": [],
                "0xc": [_project(i, "0xc") for i in range(12)],
            }
        )
        client = _client(subgraph, ["0xa", "0xb", "0xc"])

        assert await client.count_all_projects() == Success(17)

    @pytest.mark.asyncio
    async def test_count_all_projects_failure_voids_sum(self):
        subgraph = FakeSubgraph(
            {
                "0xa": [_project(i, "0xa") for i in range(5)],
                "0xc": [_project(i, "0xc") for i in range(12)],
            },
            failing={"0xb"},
        )
        client = _client(subgraph, ["0xa", "0xb", "0xc"])

        outcome = await client.count_all_projects()

        assert isinstance(outcome, Failure)
        assert isinstance(outcome.error, TransportError)
        assert outcome.contract_id == "0xb"
        assert outcome.value_or_none() is None

    @pytest.mark.asyncio
    async def test_unknown_contract_is_failure(self):
        """A null contract entity is an error, not an empty count."""
        client = _client(FakeSubgraph({}), ["0xdead"])

        outcome = await client.count_contract_projects("0xdead")

        assert isinstance(outcome, Failure)
        assert isinstance(outcome.error, QueryError)


class TestGetProjectById:
    """Test project lookup by number."""

    @pytest.mark.asyncio
    async def test_first_match_across_contracts(self):
        subgraph = FakeSubgraph(
            {"0xa": [], "0xb": [_project(1, "0xb")], "0xc": [_project(42, "0xc")]}
        )
        client = _client(subgraph, ["0xa", "0xb", "0xc"])

        outcome = await client.get_project_by_id(42)

        assert isinstance(outcome, Success)
        assert isinstance(outcome.value, Project)
        assert outcome.value.project_id == 42
        assert outcome.value.contract.id == "0xc"
        assert len(subgraph.calls_for("getContractProject")) == 3

    @pytest.mark.asyncio
    async def test_registry_order_decides_duplicates(self):
        subgraph = FakeSubgraph({"0xa": [_project(7, "0xa")], "0xb": [_project(7, "0xb")]})
        client = _client(subgraph, ["0xb", "0xa"])

        outcome = await client.get_project_by_id(7)

        assert outcome.value.contract.id == "0xb"

    @pytest.mark.asyncio
    async def test_absent_everywhere_is_empty(self):
        subgraph = FakeSubgraph({"0xa": [], "0xb": [], "0xc": []})
        client = _client(subgraph, ["0xa", "0xb", "0xc"])

        outcome = await client.get_project_by_id(999)

        assert isinstance(outcome, Empty)
        assert not isinstance(outcome, Failure)

    @pytest.mark.asyncio
    async def test_failing_contract_treated_as_absent(self):
        subgraph = FakeSubgraph({"0xa": [], "0xc": [_project(42, "0xc")]}, failing={"0xb"})
        client = _client(subgraph, ["0xa", "0xb", "0xc"])

        outcome = await client.get_project_by_id(42)

        assert outcome.value.contract.id == "0xc"

    @pytest.mark.asyncio
    async def test_every_contract_failing_is_failure(self):
        subgraph = FakeSubgraph({}, failing={"0xa", "0xb"})
        client = _client(subgraph, ["0xa", "0xb"])

        assert isinstance(await client.get_project_by_id(1), Failure)

    @pytest.mark.asyncio
    async def test_direct_contract_bypasses_registry(self):
        """An explicit contract issues exactly one lookup against it."""
        subgraph = FakeSubgraph({"0xabc": [_project(42, "0xabc")]})
        client = _client(subgraph, ["0xa", "0xb", "0xc"])

        outcome = await client.get_project_by_id(42, "0xABC")

        assert outcome.value.project_id == 42
        assert subgraph.calls == [("getContractProject", {"id": "0xabc", "projectId": 42})]

    @pytest.mark.asyncio
    async def test_direct_contract_not_found(self):
        subgraph = FakeSubgraph({"0xabc": []})
        client = _client(subgraph, ["0xa"])

        assert isinstance(await client.get_project_by_id(42, "0xabc"), Empty)

    @pytest.mark.asyncio
    async def test_direct_contract_failure(self):
        subgraph = FakeSubgraph({}, failing={"0xabc"})
        client = _client(subgraph, ["0xa"])

        outcome = await client.get_project_by_id(42, "0xabc")

        assert isinstance(outcome, Failure)
        assert outcome.contract_id == "0xabc"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad_id", [-1, "42", 4.2, True])
    async def test_invalid_project_id(self, bad_id):
        client = _client(FakeSubgraph({}), ["0xa"])
        with pytest.raises(ValueError, match="project_id"):
            await client.get_project_by_id(bad_id)


class TestFactoryProjects:
    """Test factory project collection."""

    @pytest.mark.asyncio
    async def test_concatenates_in_registry_order(self):
        subgraph = FakeSubgraph(
            {
                "0xa": [_project(1, "0xa", "factory"), _project(2, "0xa", "curated")],
                "0xb": [_project(2, "0xb", "factory"), _project(3, "0xb", "factory")],
            }
        )
        client = _client(subgraph, ["0xa", "0xb"])

        outcome = await client.get_all_factory_projects()

        assert isinstance(outcome, Success)
        assert [(p.contract.id, p.project_id) for p in outcome.value] == [
            ("0xa", 1),
            ("0xb", 2),
            ("0xb", 3),
        ]
        assert all(p.curation_status == "factory" for p in outcome.value)

    @pytest.mark.asyncio
    async def test_collects_across_pages(self):
        rows = [_project(i, "0xa", "factory") for i in range(25)]
        subgraph = FakeSubgraph({"0xa": rows})
        client = _client(subgraph, ["0xa"], page_size=10)

        outcome = await client.get_contract_factory_projects("0xa")

        assert [p.project_id for p in outcome.value] == list(range(25))
        assert [c["skip"] for c in subgraph.calls_for("getContractFactoryProjects")] == [0, 10, 20]

    @pytest.mark.asyncio
    async def test_failure_voids_collection(self):
        subgraph = FakeSubgraph({"0xa": [_project(1, "0xa", "factory")]}, failing={"0xb"})
        client = _client(subgraph, ["0xa", "0xb"])

        assert isinstance(await client.get_all_factory_projects(), Failure)


class BrokenTransport:
    """Transport whose every call raises an exception outside the library hierarchy."""

    def __init__(self) -> None:
        self.calls = 0

    async def execute(self, document: str, variables: dict) -> dict:
        self.calls += 1
        raise ConnectionError("socket closed")


class TestForeignTransportErrors:
    """Exceptions outside SubgraphError still come back as Failure."""

    @pytest.mark.asyncio
    async def test_direct_contract_lookup_returns_failure(self):
        transport = BrokenTransport()
        client = _client(transport, ["0xa", "0xb"])

        outcome = await client.get_project_by_id(42, "0xabc")

        assert isinstance(outcome, Failure)
        assert isinstance(outcome.error, ConnectionError)
        assert outcome.contract_id == "0xabc"
        assert transport.calls == 1

    @pytest.mark.asyncio
    async def test_per_contract_helpers_return_failure(self):
        client = _client(BrokenTransport(), ["0xa"])

        for outcome in (
            await client.count_contract_projects("0xabc"),
            await client.get_contract_project(1, "0xabc"),
            await client.get_contract_factory_projects("0xabc"),
        ):
            assert isinstance(outcome, Failure)
            assert isinstance(outcome.error, ConnectionError)

    @pytest.mark.asyncio
    async def test_malformed_errors_array_returns_failure(self):
        """A real transport fed a string errors array yields Failure(QueryError)."""
        transport = GraphQLTransport("https://api.example.com/subgraphs/name/test")
        transport._http.post = AsyncMock(return_value={"errors": ["indexing_error"]})
        client = _client(transport, ["0xabc"])

        outcome = await client.count_contract_projects("0xabc")

        assert isinstance(outcome, Failure)
        assert isinstance(outcome.error, QueryError)

    @pytest.mark.asyncio
    async def test_invalid_json_body_returns_failure(self):
        transport = GraphQLTransport("https://api.example.com/subgraphs/name/test")
        transport._http.post = AsyncMock(
            side_effect=json.JSONDecodeError("Expecting value", "<html>", 0)
        )
        client = _client(transport, ["0xabc"])

        outcome = await client.get_project_by_id(42, "0xabc")

        assert isinstance(outcome, Failure)
        assert isinstance(outcome.error, QueryError)


class TestClientLifecycle:
    """Test transport ownership."""

    @pytest.mark.asyncio
    async def test_injected_transport_not_closed(self):
        transport = FakeSubgraph({})
        transport.close = AsyncMock()

        async with _client(transport, ["0xa"]):
            pass

        transport.close.assert_not_called()

    @pytest.mark.asyncio
    async def test_owned_transport_closed(self):
        client = ArtBlocksSubgraphClient(registry=ContractRegistry.from_mapping({"a": "0xa"}))
        client._transport.close = AsyncMock()

        await client.close()

        client._transport.close.assert_called_once()

    def test_default_registry(self):
        client = ArtBlocksSubgraphClient()
        assert len(client.registry) >= 1
