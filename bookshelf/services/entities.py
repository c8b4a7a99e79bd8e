"""
Entity Service

Point lookups and the CRUD operations for authors and books.

Every write is a single store mutation:
- add_*    → insert, returns the new record
- update_* → update, returns the updated record or None if the id is unknown
- delete_* → delete, returns DeleteResult(ok=True) whether or not a row
             matched; a failing delete raises StoreError rather than
             reporting ok=False

Deleting an author leaves its books in place. Their author_id then dangles
and resolves to no author.
"""

import logging
from dataclasses import dataclass

from bookshelf.store.base import AuthorRecord, BookRecord, EntityStore, Table

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when input validation fails."""

    pass


@dataclass(frozen=True)
class DeleteResult:
    """Outcome of a delete operation."""

    ok: bool


def clean_name(name: str, field: str = "name") -> str:
    """
    Strip surrounding whitespace and reject blank names.

    Raises:
        ValidationError: If nothing is left after stripping
    """
    cleaned = name.strip()
    if not cleaned:
        raise ValidationError(f"{field} cannot be empty or whitespace")
    return cleaned


# =============================================================================
# Lookups
# =============================================================================


async def get_author(store: EntityStore, id: int) -> AuthorRecord | None:
    return await store.get(Table.AUTHOR, id)


async def get_book(store: EntityStore, id: int) -> BookRecord | None:
    return await store.get(Table.BOOK, id)


# =============================================================================
# Authors
# =============================================================================


async def add_author(store: EntityStore, name: str) -> AuthorRecord:
    name = clean_name(name)
    author_id = await store.insert(Table.AUTHOR, {"name": name})
    logger.info(f"Added author {author_id}")
    return AuthorRecord(id=author_id, name=name)


async def update_author(store: EntityStore, id: int, name: str) -> AuthorRecord | None:
    name = clean_name(name)
    found = await store.update(Table.AUTHOR, id, {"name": name})
    if not found:
        logger.info(f"Update of unknown author {id}")
        return None
    return AuthorRecord(id=id, name=name)


async def delete_author(store: EntityStore, id: int) -> DeleteResult:
    await store.delete(Table.AUTHOR, id)
    logger.info(f"Deleted author {id}")
    return DeleteResult(ok=True)


# =============================================================================
# Books
# =============================================================================


async def add_book(store: EntityStore, name: str, author_id: int) -> BookRecord:
    name = clean_name(name)
    book_id = await store.insert(Table.BOOK, {"name": name, "author_id": author_id})
    logger.info(f"Added book {book_id} (author {author_id})")
    return BookRecord(id=book_id, name=name, author_id=author_id)


async def update_book(
    store: EntityStore,
    id: int,
    name: str,
    author_id: int,
) -> BookRecord | None:
    name = clean_name(name)
    found = await store.update(Table.BOOK, id, {"name": name, "author_id": author_id})
    if not found:
        logger.info(f"Update of unknown book {id}")
        return None
    return BookRecord(id=id, name=name, author_id=author_id)


async def delete_book(store: EntityStore, id: int) -> DeleteResult:
    await store.delete(Table.BOOK, id)
    logger.info(f"Deleted book {id}")
    return DeleteResult(ok=True)
