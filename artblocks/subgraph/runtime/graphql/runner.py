"""GraphQL query runner using query specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from .transport import GraphQLTransport


class QueryExecutor(Protocol):
    async def execute(self, document: str, variables: dict[str, Any]) -> dict[str, Any]: ...


@dataclass(frozen=True)
class QuerySpec:
    id: str
    document: str
    build_variables: Callable[[dict[str, Any]], dict[str, Any]]


class ResponseAdapter:
    def parse(self, data: dict[str, Any], params: dict[str, Any]) -> Any:
        return data


class QueryRunner:
    def __init__(self, transport: GraphQLTransport | QueryExecutor) -> None:
        self._t = transport

    async def run(
        self, *, spec: QuerySpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        variables = spec.build_variables(params)
        data = await self._t.execute(spec.document, variables)
        return adapter.parse(data, params)
