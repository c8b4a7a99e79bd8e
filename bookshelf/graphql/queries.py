"""
GraphQL Query Resolvers

Defines all read operations (queries) for the GraphQL API.
Each resolver reads through the entity store found on the context.
"""

import strawberry
from strawberry.types import Info

from bookshelf.graphql.context import GraphQLContext
from bookshelf.graphql.errors import graphql_errors
from bookshelf.graphql.types.author import AuthorConnection, AuthorType
from bookshelf.graphql.types.book import BookConnection, BookType
from bookshelf.services import entities
from bookshelf.services.connection import build_connection
from bookshelf.services.cursor import INITIAL_CURSOR
from bookshelf.store.base import Table


@strawberry.type
class Query:
    """
    GraphQL Query type containing all read operations.

    All resolvers receive an `info` parameter that contains the
    GraphQL context with the entity store and settings.
    """

    @strawberry.field(description="Get a page of books in ascending id order")
    async def books(
        self,
        info: Info[GraphQLContext, None],
        first: int | None = None,
        after: str = INITIAL_CURSOR,
    ) -> BookConnection:
        """
        Get the books that follow the `after` cursor.

        Args:
            first: Page size; omitted means the DEFAULT_PAGE_SIZE setting
                (10 unless configured). Clamped to [0, MAX_PAGE_SIZE]
            after: Cursor of the last book already seen; the default starts
                at the first book

        Returns:
            Book connection; pass pageInfo.endCursor as `after` to get the
            next page
        """
        ctx = info.context

        with graphql_errors(ctx.settings.debug):
            connection = await build_connection(
                ctx.store,
                Table.BOOK,
                first=ctx.page_size(first),
                after=after,
                max_page_size=ctx.settings.max_page_size,
            )

        return BookConnection.from_connection(connection)

    @strawberry.field(description="Get a single book by ID")
    async def book(self, info: Info[GraphQLContext, None], id: int) -> BookType | None:
        """Get a single book by ID, or null if there is none."""
        ctx = info.context

        with graphql_errors(ctx.settings.debug):
            book = await entities.get_book(ctx.store, id)

        if book is None:
            return None

        return BookType.from_record(book)

    @strawberry.field(description="Get a page of authors in ascending id order")
    async def authors(
        self,
        info: Info[GraphQLContext, None],
        first: int | None = None,
        after: str = INITIAL_CURSOR,
    ) -> AuthorConnection:
        """
        Get the authors that follow the `after` cursor.

        Uses the same pagination rules as `books`.
        """
        ctx = info.context

        with graphql_errors(ctx.settings.debug):
            connection = await build_connection(
                ctx.store,
                Table.AUTHOR,
                first=ctx.page_size(first),
                after=after,
                max_page_size=ctx.settings.max_page_size,
            )

        return AuthorConnection.from_connection(connection)

    @strawberry.field(description="Get a single author by ID")
    async def author(self, info: Info[GraphQLContext, None], id: int) -> AuthorType | None:
        """Get a single author by ID."""
        ctx = info.context

        with graphql_errors(ctx.settings.debug):
            author = await entities.get_author(ctx.store, id)

        if author is None:
            return None

        return AuthorType.from_record(author)
