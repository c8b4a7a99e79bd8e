"""
GraphQL Mutation Resolvers

Defines all write operations (mutations) for the GraphQL API.
Each mutation performs exactly one store write.
"""

import strawberry
from strawberry.types import Info

from bookshelf.graphql.context import GraphQLContext
from bookshelf.graphql.errors import graphql_errors
from bookshelf.graphql.types.author import AuthorType
from bookshelf.graphql.types.book import BookType
from bookshelf.graphql.types.pagination import DeleteResultType
from bookshelf.services import entities


@strawberry.type
class Mutation:
    """
    GraphQL Mutation type containing all write operations.

    Names are stripped of surrounding whitespace; a blank name is rejected
    with a BAD_USER_INPUT error. Updates of an unknown id return null.
    """

    # =========================================================================
    # Book Mutations
    # =========================================================================

    @strawberry.mutation(description="Add a book")
    async def add_book(
        self,
        info: Info[GraphQLContext, None],
        name: str,
        author_id: int,
    ) -> BookType:
        """
        Add a book.

        author_id is stored as given; it is not checked against existing
        authors.
        """
        ctx = info.context

        with graphql_errors(ctx.settings.debug):
            book = await entities.add_book(ctx.store, name, author_id)

        return BookType.from_record(book)

    @strawberry.mutation(description="Update an existing book")
    async def update_book(
        self,
        info: Info[GraphQLContext, None],
        id: int,
        name: str,
        author_id: int,
    ) -> BookType | None:
        """Replace a book's name and author. Returns null if the id is unknown."""
        ctx = info.context

        with graphql_errors(ctx.settings.debug):
            book = await entities.update_book(ctx.store, id, name, author_id)

        if book is None:
            return None

        return BookType.from_record(book)

    @strawberry.mutation(description="Delete a book")
    async def delete_book(
        self,
        info: Info[GraphQLContext, None],
        id: int,
    ) -> DeleteResultType:
        """
        Delete a book.

        Returns ok=true even when no book had that id.
        """
        ctx = info.context

        with graphql_errors(ctx.settings.debug):
            result = await entities.delete_book(ctx.store, id)

        return DeleteResultType.from_result(result)

    # =========================================================================
    # Author Mutations
    # =========================================================================

    @strawberry.mutation(description="Add an author")
    async def add_author(
        self,
        info: Info[GraphQLContext, None],
        name: str,
    ) -> AuthorType:
        """Add an author."""
        ctx = info.context

        with graphql_errors(ctx.settings.debug):
            author = await entities.add_author(ctx.store, name)

        return AuthorType.from_record(author)

    @strawberry.mutation(description="Update an existing author")
    async def update_author(
        self,
        info: Info[GraphQLContext, None],
        id: int,
        name: str,
    ) -> AuthorType | None:
        """Rename an author. Returns null if the id is unknown."""
        ctx = info.context

        with graphql_errors(ctx.settings.debug):
            author = await entities.update_author(ctx.store, id, name)

        if author is None:
            return None

        return AuthorType.from_record(author)

    @strawberry.mutation(description="Delete an author")
    async def delete_author(
        self,
        info: Info[GraphQLContext, None],
        id: int,
    ) -> DeleteResultType:
        """
        Delete an author.

        The author's books are kept; their `author` field becomes null.
        """
        ctx = info.context

        with graphql_errors(ctx.settings.debug):
            result = await entities.delete_author(ctx.store, id)

        return DeleteResultType.from_result(result)
