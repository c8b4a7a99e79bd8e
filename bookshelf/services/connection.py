"""
Connection Builder

Builds one page of a cursor-paginated listing ("connection") from the
entity store.

Algorithm
=========
1. Decode `after` to the last seen id
2. Fetch up to `first` rows with id > last id, ascending (first=0 fetches nothing)
3. No rows → empty edges and an empty PageInfo
4. Count every row with id > last id (the rows just fetched included)
5. has_next_page = remaining > first
6. One edge per row, its cursor being encode_cursor(row.id)
7. start_cursor echoes `after`
8. end_cursor is the last row's cursor when there is a next page, else None

The same end_cursor rule applies to every table.

Steps 2 and 4 are separate awaited queries with no transaction around them,
so rows inserted or deleted in between can make has_next_page disagree with
the next fetch.
"""

import logging
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from bookshelf.services.cursor import INITIAL_CURSOR, decode_cursor, encode_cursor
from bookshelf.store.base import EntityStore, Table

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

T = TypeVar("T")


@dataclass(frozen=True)
class PageInfo:
    """
    Pagination metadata of a connection.

    An empty page carries the defaults: no next page and no cursors.
    """

    has_next_page: bool = False
    start_cursor: str | None = None
    end_cursor: str | None = None


@dataclass(frozen=True)
class Edge(Generic[T]):
    """A node together with the cursor pointing at it."""

    node: T
    cursor: str


@dataclass(frozen=True)
class Connection(Generic[T]):
    """One page of results."""

    edges: list[Edge[T]] = field(default_factory=list)
    page_info: PageInfo = field(default_factory=PageInfo)

    @property
    def nodes(self) -> list[T]:
        return [edge.node for edge in self.edges]


def clamp_page_size(first: int, max_page_size: int = MAX_PAGE_SIZE) -> int:
    """Clamp a requested page size to [0, max_page_size]."""
    return min(max(0, first), max_page_size)


async def build_connection(
    store: EntityStore,
    table: Table,
    first: int = DEFAULT_PAGE_SIZE,
    after: str = INITIAL_CURSOR,
    max_page_size: int = MAX_PAGE_SIZE,
) -> Connection:
    """
    Fetch the page of `table` that follows the `after` cursor.

    Args:
        store: Entity store to read from
        table: Table being listed
        first: Page size (clamped to [0, max_page_size]; 0 gives an empty page)
        after: Cursor of the last row already seen
        max_page_size: Upper bound for `first`

    Returns:
        Connection with edges in ascending id order

    Raises:
        MalformedCursorError: If `after` is not a valid cursor
        StoreError: If either query fails
    """
    last_id = decode_cursor(after)
    first = clamp_page_size(first, max_page_size)
    if first == 0:
        return Connection()

    rows = await store.find(table, after_id=last_id, limit=first)
    if not rows:
        logger.debug(f"No {table} rows after id {last_id}")
        return Connection()

    remaining = await store.count(table, after_id=last_id)
    has_next_page = remaining > first

    edges = [Edge(node=row, cursor=encode_cursor(row.id)) for row in rows]

    return Connection(
        edges=edges,
        page_info=PageInfo(
            has_next_page=has_next_page,
            start_cursor=after,
            end_cursor=edges[-1].cursor if has_next_page else None,
        ),
    )
