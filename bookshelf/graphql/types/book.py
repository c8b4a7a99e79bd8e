"""
GraphQL Book Type

Defines the Book type and its connection for GraphQL queries.
"""

import strawberry
from strawberry.types import Info

from bookshelf.graphql.context import GraphQLContext
from bookshelf.graphql.errors import graphql_errors
from bookshelf.graphql.types.author import AuthorType
from bookshelf.graphql.types.pagination import PageInfoType
from bookshelf.services.connection import Connection
from bookshelf.services.relations import resolve_author_of
from bookshelf.store.base import BookRecord


@strawberry.type
class BookType:
    """
    GraphQL type representing a book.

    `author` is resolved lazily from author_id and is null when no author
    has that id.
    """

    id: int
    name: str
    author_id: int

    @classmethod
    def from_record(cls, record: BookRecord) -> "BookType":
        return cls(id=record.id, name=record.name, author_id=record.author_id)

    def to_record(self) -> BookRecord:
        return BookRecord(id=self.id, name=self.name, author_id=self.author_id)

    @strawberry.field(description="The author who wrote this book")
    async def author(self, info: Info[GraphQLContext, None]) -> AuthorType | None:
        ctx = info.context
        with graphql_errors(ctx.settings.debug):
            author = await resolve_author_of(ctx.store, self.to_record())

        if author is None:
            return None
        return AuthorType.from_record(author)


@strawberry.type
class BookEdge:
    """A book and its cursor."""

    node: BookType
    cursor: str


@strawberry.type
class BookConnection:
    """
    Cursor-paginated list of books.

    Follows the Connection pattern for GraphQL pagination.
    """

    edges: list[BookEdge]
    page_info: PageInfoType

    @classmethod
    def from_connection(cls, connection: Connection) -> "BookConnection":
        return cls(
            edges=[
                BookEdge(node=BookType.from_record(e.node), cursor=e.cursor)
                for e in connection.edges
            ],
            page_info=PageInfoType.from_page_info(connection.page_info),
        )
