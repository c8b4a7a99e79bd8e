"""
GraphQL Author Type

Defines the Author type and its connection for GraphQL queries.
"""

from typing import TYPE_CHECKING, Annotated

import strawberry
from strawberry.types import Info

from bookshelf.graphql.context import GraphQLContext
from bookshelf.graphql.errors import graphql_errors
from bookshelf.graphql.types.pagination import PageInfoType
from bookshelf.services.connection import Connection
from bookshelf.services.relations import resolve_books_of
from bookshelf.store.base import AuthorRecord

if TYPE_CHECKING:
    from bookshelf.graphql.types.book import BookType


@strawberry.type
class AuthorType:
    """
    GraphQL type representing a book author.

    `books` is resolved lazily, only when the query selects it.
    """

    id: int
    name: str

    @classmethod
    def from_record(cls, record: AuthorRecord) -> "AuthorType":
        return cls(id=record.id, name=record.name)

    def to_record(self) -> AuthorRecord:
        return AuthorRecord(id=self.id, name=self.name)

    @strawberry.field(description="Books written by this author")
    async def books(
        self,
        info: Info[GraphQLContext, None],
    ) -> list[Annotated["BookType", strawberry.lazy("bookshelf.graphql.types.book")]]:
        from bookshelf.graphql.types.book import BookType

        ctx = info.context
        with graphql_errors(ctx.settings.debug):
            books = await resolve_books_of(ctx.store, self.to_record())

        return [BookType.from_record(b) for b in books]


@strawberry.type
class AuthorEdge:
    """An author and its cursor."""

    node: AuthorType
    cursor: str


@strawberry.type
class AuthorConnection:
    """
    Cursor-paginated list of authors.

    Follows the Connection pattern for GraphQL pagination.
    """

    edges: list[AuthorEdge]
    page_info: PageInfoType

    @classmethod
    def from_connection(cls, connection: Connection) -> "AuthorConnection":
        return cls(
            edges=[
                AuthorEdge(node=AuthorType.from_record(e.node), cursor=e.cursor)
                for e in connection.edges
            ],
            page_info=PageInfoType.from_page_info(connection.page_info),
        )
