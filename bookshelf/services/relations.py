"""
Relation Resolver

Follows the book → author reference in both directions.

Each call is one store round trip. Resolving the author of every book in a
page therefore issues one query per book.
"""

from bookshelf.store.base import AuthorRecord, BookRecord, EntityStore, Table


async def resolve_author_of(store: EntityStore, book: BookRecord) -> AuthorRecord | None:
    """
    Look up the author a book points at.

    Returns None when no author has that id (the reference is not enforced,
    so it may dangle). Only store failures raise.
    """
    return await store.get(Table.AUTHOR, book.author_id)


async def resolve_books_of(store: EntityStore, author: AuthorRecord) -> list[BookRecord]:
    """Every book whose author_id is the author's id (possibly none)."""
    return await store.find(Table.BOOK, author_id=author.id)
