"""
Connection Builder Tests

Tests for cursor-paginated listings built on top of the entity store.
Store-backed tests run against both backends through the `store` fixture.
"""

from unittest.mock import AsyncMock

import pytest

from bookshelf.services.connection import (
    Connection,
    PageInfo,
    build_connection,
    clamp_page_size,
)
from bookshelf.services.cursor import INITIAL_CURSOR, MalformedCursorError, encode_cursor
from bookshelf.store import BookRecord, EntityStore, Table


def ids(connection: Connection) -> list[int]:
    return [edge.node.id for edge in connection.edges]


class TestBookPages:
    """Paging through six books two at a time."""

    @pytest.mark.asyncio
    async def test_first_page(self, store: EntityStore, sample_library):
        """The first page holds the lowest ids and points at the next page."""
        page = await build_connection(store, Table.BOOK, first=2, after=encode_cursor(0))

        assert ids(page) == [1, 2]
        assert page.page_info.has_next_page is True
        assert page.page_info.start_cursor == encode_cursor(0)
        assert page.page_info.end_cursor == encode_cursor(2)

    @pytest.mark.asyncio
    async def test_second_page(self, store: EntityStore, sample_library):
        """Passing endCursor as `after` continues after the last row."""
        page = await build_connection(store, Table.BOOK, first=2, after=encode_cursor(2))

        assert ids(page) == [3, 4]
        assert page.page_info.has_next_page is True
        assert page.page_info.start_cursor == encode_cursor(2)
        assert page.page_info.end_cursor == encode_cursor(4)

    @pytest.mark.asyncio
    async def test_last_page(self, store: EntityStore, sample_library):
        """The last page has no next page and no end cursor."""
        page = await build_connection(store, Table.BOOK, first=2, after=encode_cursor(4))

        assert ids(page) == [5, 6]
        assert page.page_info.has_next_page is False
        assert page.page_info.end_cursor is None

    @pytest.mark.asyncio
    async def test_edges_carry_their_cursor(self, store: EntityStore, sample_library):
        """Each edge's cursor encodes its node's id."""
        page = await build_connection(store, Table.BOOK, first=3)

        for edge in page.edges:
            assert edge.cursor == encode_cursor(edge.node.id)
            assert isinstance(edge.node, BookRecord)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("k", [1, 2, 3, 4, 5, 6])
    async def test_first_k_books(self, store: EntityStore, sample_library, k: int):
        """first=k from the start returns the k lowest ids, in order."""
        page = await build_connection(store, Table.BOOK, first=k, after=INITIAL_CURSOR)

        expected = sorted(b.id for b in sample_library["books"])[:k]
        assert ids(page) == expected
        assert page.page_info.has_next_page is (k < 6)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page_size", [1, 2, 4, 5, 6, 10])
    async def test_full_traversal(self, store: EntityStore, sample_library, page_size: int):
        """Following endCursor visits every book once, in ascending order."""
        seen: list[int] = []
        after = INITIAL_CURSOR

        while True:
            page = await build_connection(store, Table.BOOK, first=page_size, after=after)
            seen.extend(ids(page))
            if not page.page_info.has_next_page:
                break
            after = page.page_info.end_cursor

        assert seen == [b.id for b in sample_library["books"]]

    @pytest.mark.asyncio
    async def test_exact_fit_has_no_next_page(self, store: EntityStore, sample_library):
        """When exactly `first` rows remain, there is no next page."""
        page = await build_connection(store, Table.BOOK, first=6)

        assert len(page.edges) == 6
        assert page.page_info.has_next_page is False

    @pytest.mark.asyncio
    async def test_default_page_size(self, store: EntityStore):
        """Without `first`, pages hold ten rows."""
        for i in range(12):
            await store.insert(Table.BOOK, {"name": f"Book {i}", "author_id": 1})

        page = await build_connection(store, Table.BOOK)

        assert len(page.edges) == 10
        assert page.page_info.has_next_page is True


class TestEmptyPages:
    """Pages with no rows."""

    @pytest.mark.asyncio
    async def test_empty_table(self, store: EntityStore):
        """An empty table yields no edges and an empty PageInfo."""
        page = await build_connection(store, Table.BOOK, first=5)

        assert page.edges == []
        assert page.page_info == PageInfo()
        assert page.page_info.has_next_page is False
        assert page.page_info.start_cursor is None
        assert page.page_info.end_cursor is None

    @pytest.mark.asyncio
    async def test_cursor_past_last_row(self, store: EntityStore, sample_library):
        """A cursor beyond the last id yields an empty page."""
        page = await build_connection(store, Table.BOOK, first=5, after=encode_cursor(100))

        assert page.edges == []
        assert page.page_info == PageInfo()


class TestAuthorPages:
    """The author listing follows the same rules as books."""

    @pytest.mark.asyncio
    async def test_author_end_cursor_policy(self, store: EntityStore, sample_library):
        """endCursor is set only while there is a next page."""
        first_page = await build_connection(store, Table.AUTHOR, first=1)
        assert ids(first_page) == [1]
        assert first_page.page_info.end_cursor == encode_cursor(1)

        last_page = await build_connection(
            store, Table.AUTHOR, first=1, after=first_page.page_info.end_cursor
        )
        assert ids(last_page) == [2]
        assert last_page.page_info.has_next_page is False
        assert last_page.page_info.end_cursor is None

    @pytest.mark.asyncio
    async def test_book_cursor_accepted_for_authors(self, store: EntityStore, sample_library):
        """Cursors are not tied to an entity type."""
        page = await build_connection(store, Table.AUTHOR, first=5, after=encode_cursor(1))

        assert ids(page) == [2]


class TestPageSizeBounds:
    """Tests for page size clamping."""

    @pytest.mark.parametrize(
        "requested,expected",
        [(-5, 0), (0, 0), (1, 1), (50, 50), (100, 100), (1000, 100)],
    )
    def test_clamp_page_size(self, requested: int, expected: int):
        assert clamp_page_size(requested) == expected

    def test_clamp_custom_maximum(self):
        assert clamp_page_size(30, max_page_size=25) == 25

    @pytest.mark.asyncio
    async def test_zero_first_returns_empty_page(self, store: EntityStore, sample_library):
        """first=0 returns no rows and an empty PageInfo."""
        page = await build_connection(store, Table.BOOK, first=0)

        assert page.edges == []
        assert page.page_info == PageInfo()

    @pytest.mark.asyncio
    async def test_max_page_size(self, store: EntityStore, sample_library):
        """first is capped by max_page_size."""
        page = await build_connection(store, Table.BOOK, first=50, max_page_size=4)

        assert ids(page) == [1, 2, 3, 4]
        assert page.page_info.has_next_page is True


class TestQuerySequence:
    """The list query and the count query, checked against a mock store."""

    @pytest.mark.asyncio
    async def test_list_then_count(self):
        """The count covers every row after the cursor, fetched rows included."""
        store = AsyncMock(spec=EntityStore)
        store.find.return_value = [
            BookRecord(id=5, name="A", author_id=1),
            BookRecord(id=7, name="B", author_id=1),
        ]
        store.count.return_value = 3

        page = await build_connection(store, Table.BOOK, first=2, after=encode_cursor(4))

        store.find.assert_awaited_once_with(Table.BOOK, after_id=4, limit=2)
        store.count.assert_awaited_once_with(Table.BOOK, after_id=4)
        assert page.page_info.has_next_page is True
        assert page.page_info.end_cursor == encode_cursor(7)

    @pytest.mark.asyncio
    async def test_no_count_for_empty_page(self):
        """An empty fetch skips the count query."""
        store = AsyncMock(spec=EntityStore)
        store.find.return_value = []

        page = await build_connection(store, Table.BOOK)

        store.count.assert_not_awaited()
        assert page.edges == []

    @pytest.mark.asyncio
    async def test_zero_first_queries_nothing(self):
        store = AsyncMock(spec=EntityStore)

        page = await build_connection(store, Table.BOOK, first=0)

        store.find.assert_not_awaited()
        store.count.assert_not_awaited()
        assert page.edges == []

    @pytest.mark.asyncio
    async def test_oversized_cursor_queries_nothing(self):
        """A cursor past the 64-bit id range fails before any store access."""
        store = AsyncMock(spec=EntityStore)

        with pytest.raises(MalformedCursorError):
            await build_connection(store, Table.BOOK, after=encode_cursor(10**20))

        store.find.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_malformed_cursor_queries_nothing(self):
        """A bad cursor fails before any store access."""
        store = AsyncMock(spec=EntityStore)

        with pytest.raises(MalformedCursorError):
            await build_connection(store, Table.BOOK, after="garbage")

        store.find.assert_not_awaited()
        store.count.assert_not_awaited()
