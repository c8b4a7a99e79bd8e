"""
GraphQL Types Package

Strawberry type definitions for the GraphQL schema.

Types defined here:
- BookType: Book with its author
- AuthorType: Author with their books
- BookConnection / AuthorConnection: Cursor-paginated listings
- PageInfoType: Pagination metadata
- DeleteResultType: Outcome of delete mutations
"""

from bookshelf.graphql.types.author import AuthorConnection, AuthorEdge, AuthorType
from bookshelf.graphql.types.book import BookConnection, BookEdge, BookType
from bookshelf.graphql.types.pagination import DeleteResultType, PageInfoType

__all__ = [
    # Book types
    "BookType",
    "BookEdge",
    "BookConnection",
    # Author types
    "AuthorType",
    "AuthorEdge",
    "AuthorConnection",
    # Shared types
    "PageInfoType",
    "DeleteResultType",
]
