"""
Entity Store Package

Persistence for authors and books behind a single async interface.

Usage:
    from bookshelf.store import create_store

    store = create_store(settings)
    await store.open()
"""

from bookshelf.config import Settings
from bookshelf.store.base import (
    AuthorRecord,
    BookRecord,
    EntityStore,
    Record,
    StoreError,
    Table,
)
from bookshelf.store.orm import OrmEntityStore
from bookshelf.store.sql import SqlEntityStore


def create_store(settings: Settings) -> EntityStore:
    """Build the store implementation selected by settings.store_backend."""
    if settings.store_backend == "orm":
        return OrmEntityStore(settings.database_url, echo=settings.db_echo)
    return SqlEntityStore(settings.database_url, echo=settings.db_echo)


__all__ = [
    "AuthorRecord",
    "BookRecord",
    "EntityStore",
    "OrmEntityStore",
    "Record",
    "SqlEntityStore",
    "StoreError",
    "Table",
    "create_store",
]
