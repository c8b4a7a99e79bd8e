"""
GraphQL Package

This package provides the GraphQL API using Strawberry GraphQL.

Features:
- Typed schema built (and validated) at import time
- Cursor-paginated `books` and `authors` connections
- Point lookups and add/update/delete mutations for both entities
- Lazy relation fields: Book.author and Author.books

Usage:
    The GraphQL endpoint is available at /graphql with the GraphiQL IDE
    for development.

Example Query:
    query {
        books(first: 2) {
            edges {
                cursor
                node { id name author { name } }
            }
            pageInfo { hasNextPage endCursor }
        }
    }
"""

import strawberry
from strawberry.fastapi import GraphQLRouter

from bookshelf.config import Settings
from bookshelf.graphql.context import get_context
from bookshelf.graphql.mutations import Mutation
from bookshelf.graphql.queries import Query

# Create the GraphQL schema
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


def create_graphql_router(settings: Settings) -> GraphQLRouter:
    """
    Create the GraphQL router for FastAPI.

    Args:
        settings: Application settings (controls the GraphiQL IDE)

    Returns:
        GraphQLRouter configured with schema and context
    """
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.graphql_ide_enabled else None,
    )


__all__ = ["schema", "create_graphql_router"]
