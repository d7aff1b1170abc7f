"""GraphQL transport over HTTP POST.

The transport is the only component that touches the network. It turns
aiohttp failures into ``TransportError`` and malformed GraphQL envelopes
into ``QueryError`` so that everything above it deals with one exception
hierarchy.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from ...core.exceptions import QueryError, TransportError
from .http_client import HTTPClient

logger = logging.getLogger(__name__)


class GraphQLTransport:
    """Executes GraphQL documents against a single endpoint.

    One instance is safe to share between concurrent operations; it holds
    no per-request state.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        http: HTTPClient | None = None,
    ) -> None:
        self.url = url
        self._http = http or HTTPClient(timeout=timeout, headers=headers)

    async def execute(self, document: str, variables: dict[str, Any]) -> dict[str, Any]:
        """Execute a query and return its ``data`` object.

        Args:
            document: GraphQL query document
            variables: Query variables

        Returns:
            The ``data`` member of the GraphQL response

        Raises:
            TransportError: Network failure, timeout or non-2xx status
            QueryError: Response carries GraphQL errors or has no data
        """
        body = {"query": document, "variables": variables}
        try:
            payload = await self._http.post(self.url, json=body)
        except aiohttp.ClientResponseError as e:
            raise TransportError(f"Subgraph returned HTTP {e.status}: {e.message}", e.status) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"Subgraph request failed: {e!r}") from e
        except ValueError as e:
            # Body was not valid JSON
            raise QueryError(f"Subgraph response is not valid JSON: {e}") from e

        if not isinstance(payload, dict):
            raise QueryError(f"Invalid response format: expected dict, got {type(payload)}")

        errors = payload.get("errors")
        if errors:
            if not isinstance(errors, list):
                errors = [errors]
            messages = "; ".join(
                str(err.get("message", err) if isinstance(err, dict) else err) for err in errors
            )
            raise QueryError(f"Subgraph query failed: {messages}", errors=errors)

        data = payload.get("data")
        if data is None:
            raise QueryError("Subgraph response missing 'data' field")
        return data

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> GraphQLTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
