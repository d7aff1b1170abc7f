"""Runtime layer: GraphQL transport, pagination and fan-out."""

from .fanout import ContractOperation, FanOutAggregator
from .graphql import GraphQLTransport, HTTPClient, QueryRunner, QuerySpec, ResponseAdapter
from .pagination import PageExecutor, PagePolicy, PageRequest, PageResult

__all__ = [
    "ContractOperation",
    "FanOutAggregator",
    "GraphQLTransport",
    "HTTPClient",
    "PageExecutor",
    "PagePolicy",
    "PageRequest",
    "PageResult",
    "QueryRunner",
    "QuerySpec",
    "ResponseAdapter",
]
