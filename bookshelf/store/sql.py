"""
SQL Entity Store

The embedded-database variant of the entity store: SQLAlchemy Core
statements executed on an async engine (SQLite through aiosqlite by default).

Each operation checks out a connection for the duration of one statement.
Reads use engine.connect(); writes use engine.begin() so they commit when
the block exits.
"""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncEngine

from bookshelf.database import build_engine, create_tables
from bookshelf.models import Author, Book
from bookshelf.store.base import (
    EntityStore,
    Record,
    Table,
    store_errors,
    to_record,
)

logger = logging.getLogger(__name__)

# Core Table objects behind each store table
_TABLES = {
    Table.AUTHOR: Author.__table__,
    Table.BOOK: Book.__table__,
}


class SqlEntityStore(EntityStore):
    """
    Entity store issuing Core statements.

    Usage:
        store = SqlEntityStore("sqlite+aiosqlite:///./db.sqlite")
        await store.open()
        author = await store.get(Table.AUTHOR, 1)
        await store.close()
    """

    def __init__(self, database_url: str, echo: bool = False) -> None:
        self.database_url = database_url
        self.engine: AsyncEngine = build_engine(database_url, echo=echo)

    async def open(self) -> None:
        with store_errors("create tables"):
            await create_tables(self.engine)
        logger.info("SQL store ready")

    async def close(self) -> None:
        await self.engine.dispose()
        logger.info("SQL store closed")

    async def get(self, table: Table, id: int) -> Record | None:
        t = _TABLES[table]
        stmt = select(t).where(t.c.id == id)

        with store_errors(f"get {table}"):
            async with self.engine.connect() as conn:
                row = (await conn.execute(stmt)).first()

        if row is None:
            return None
        return to_record(table, row._mapping)

    async def find(
        self,
        table: Table,
        *,
        after_id: int | None = None,
        author_id: int | None = None,
        limit: int | None = None,
    ) -> list[Record]:
        t = _TABLES[table]
        stmt = select(t)

        if after_id is not None:
            stmt = stmt.where(t.c.id > after_id)
        if author_id is not None:
            stmt = stmt.where(t.c.author_id == author_id)

        stmt = stmt.order_by(t.c.id)
        if limit is not None:
            stmt = stmt.limit(limit)

        with store_errors(f"list {table}"):
            async with self.engine.connect() as conn:
                rows = (await conn.execute(stmt)).all()

        return [to_record(table, row._mapping) for row in rows]

    async def count(self, table: Table, *, after_id: int | None = None) -> int:
        t = _TABLES[table]
        stmt = select(func.count()).select_from(t)

        if after_id is not None:
            stmt = stmt.where(t.c.id > after_id)

        with store_errors(f"count {table}"):
            async with self.engine.connect() as conn:
                total = (await conn.execute(stmt)).scalar()

        return total or 0

    async def insert(self, table: Table, fields: Mapping[str, Any]) -> int:
        t = _TABLES[table]

        with store_errors(f"insert {table}"):
            async with self.engine.begin() as conn:
                result = await conn.execute(insert(t).values(**fields))

        new_id = result.inserted_primary_key[0]
        logger.debug(f"Inserted {table} {new_id}")
        return new_id

    async def update(self, table: Table, id: int, fields: Mapping[str, Any]) -> bool:
        t = _TABLES[table]
        stmt = update(t).where(t.c.id == id).values(**fields)

        with store_errors(f"update {table}"):
            async with self.engine.begin() as conn:
                result = await conn.execute(stmt)

        return result.rowcount > 0

    async def delete(self, table: Table, id: int) -> bool:
        t = _TABLES[table]

        with store_errors(f"delete {table}"):
            async with self.engine.begin() as conn:
                result = await conn.execute(delete(t).where(t.c.id == id))

        if result.rowcount == 0:
            logger.debug(f"Delete of {table} {id} matched no row")
        return True
