"""GitHub client package for GraphQL API interaction."""

from .client import GitHubClient
from .graphql import DEFAULT_GRAPHQL_URL, GraphQLTransport, graphql_string
from .models import Label

__all__ = [
    "DEFAULT_GRAPHQL_URL",
    "GitHubClient",
    "GraphQLTransport",
    "Label",
    "graphql_string",
]
