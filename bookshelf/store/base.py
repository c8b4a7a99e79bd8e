"""
Entity Store Interface

Defines the storage contract the GraphQL layer depends on, the immutable
records it returns and the single error type it raises.

Two implementations live next to this module:
- SqlEntityStore (store/sql.py): SQLAlchemy Core statements on an async engine
- OrmEntityStore (store/orm.py): SQLAlchemy ORM models through AsyncSession

Both are interchangeable: resolvers only ever see EntityStore, AuthorRecord
and BookRecord.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


# =============================================================================
# Errors
# =============================================================================


class StoreError(Exception):
    """Raised when the database fails to execute a store operation."""

    def __init__(self, operation: str, message: str = "A database error occurred."):
        super().__init__(f"{operation}: {message}")
        self.operation = operation


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """
    Translate SQLAlchemy exceptions raised inside the block into StoreError.

    The original exception is logged and chained as __cause__.

    Usage:
        with store_errors("get author"):
            row = (await conn.execute(stmt)).first()
    """
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error(f"Store operation '{operation}' failed: {exc}")
        raise StoreError(operation, str(exc)) from exc


# =============================================================================
# Tables and Records
# =============================================================================


class Table(StrEnum):
    """The two tables exposed by the store."""

    AUTHOR = "author"
    BOOK = "book"


@dataclass(frozen=True)
class AuthorRecord:
    """An author row as returned by the store."""

    id: int
    name: str


@dataclass(frozen=True)
class BookRecord:
    """A book row as returned by the store."""

    id: int
    name: str
    author_id: int


Record = AuthorRecord | BookRecord


def to_record(table: Table, values: Mapping[str, Any]) -> Record:
    """Build the record for a table from a column -> value mapping."""
    if table == Table.AUTHOR:
        return AuthorRecord(id=values["id"], name=values["name"])
    return BookRecord(
        id=values["id"],
        name=values["name"],
        author_id=values["author_id"],
    )


# =============================================================================
# Store Contract
# =============================================================================


class EntityStore(ABC):
    """
    Asynchronous access to the author and book tables.

    Every method may raise StoreError. Lookups that match nothing return
    None or an empty list; they never raise.
    """

    @abstractmethod
    async def open(self) -> None:
        """Prepare the store for use (creates missing tables)."""

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying engine and its connections."""

    @abstractmethod
    async def get(self, table: Table, id: int) -> Record | None:
        """Point lookup by primary key."""

    @abstractmethod
    async def find(
        self,
        table: Table,
        *,
        after_id: int | None = None,
        author_id: int | None = None,
        limit: int | None = None,
    ) -> list[Record]:
        """
        List rows in ascending id order.

        Args:
            table: Table to read
            after_id: Only rows with id strictly greater than this
            author_id: Only books written by this author (book table only)
            limit: Maximum number of rows
        """

    @abstractmethod
    async def count(self, table: Table, *, after_id: int | None = None) -> int:
        """Number of rows, optionally only those with id greater than after_id."""

    @abstractmethod
    async def insert(self, table: Table, fields: Mapping[str, Any]) -> int:
        """Insert a row and return its generated id."""

    @abstractmethod
    async def update(self, table: Table, id: int, fields: Mapping[str, Any]) -> bool:
        """Update a row. Returns whether a row with that id existed."""

    @abstractmethod
    async def delete(self, table: Table, id: int) -> bool:
        """
        Delete a row by id.

        Returns True once the statement completed, whether or not a row
        matched. Failures raise StoreError instead of returning False.
        """
