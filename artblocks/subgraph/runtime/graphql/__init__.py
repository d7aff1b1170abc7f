"""GraphQL runtime abstractions."""

from .http_client import HTTPClient
from .runner import QueryExecutor, QueryRunner, QuerySpec, ResponseAdapter
from .transport import GraphQLTransport

__all__ = [
    "GraphQLTransport",
    "HTTPClient",
    "QueryExecutor",
    "QueryRunner",
    "QuerySpec",
    "ResponseAdapter",
]
