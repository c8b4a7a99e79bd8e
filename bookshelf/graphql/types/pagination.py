"""
GraphQL Pagination Types

PageInfo and the delete result shared by both entity types.
"""

import strawberry

from bookshelf.services.connection import PageInfo
from bookshelf.services.entities import DeleteResult


@strawberry.type
class PageInfoType:
    """
    Pagination metadata of a connection.

    startCursor echoes the `after` argument of the query. endCursor is the
    cursor to pass as `after` for the next page, and is null on the last
    page. An empty page has hasNextPage=false and both cursors null.
    """

    has_next_page: bool = False
    start_cursor: str | None = None
    end_cursor: str | None = None

    @classmethod
    def from_page_info(cls, page_info: PageInfo) -> "PageInfoType":
        return cls(
            has_next_page=page_info.has_next_page,
            start_cursor=page_info.start_cursor,
            end_cursor=page_info.end_cursor,
        )


@strawberry.type
class DeleteResultType:
    """
    Result of a delete mutation.

    ok is true once the delete ran, including when no row had that id.
    """

    ok: bool

    @classmethod
    def from_result(cls, result: DeleteResult) -> "DeleteResultType":
        return cls(ok=result.ok)
