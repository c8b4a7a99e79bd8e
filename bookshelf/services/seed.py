"""
Sample Data

The starter dataset inserted into an empty database, either at startup
(SEED_ON_STARTUP=true) or by scripts/seed_data.py.
"""

import logging

from bookshelf.store.base import EntityStore, Table

logger = logging.getLogger(__name__)

SAMPLE_AUTHORS = [
    "J. K. Rowling",
    "J. R. R. Tolkien",
    "Brent Weeks",
]

# (book name, index into SAMPLE_AUTHORS)
SAMPLE_BOOKS = [
    ("Harry Potter and the Chamber of Secrets", 0),
    ("Harry Potter and the Prisoner of Azkaban", 0),
    ("Harry Potter and the Goblet of Fire", 0),
    ("The Fellowship of the Ring", 1),
    ("The Two Towers", 1),
    ("The Return of the King", 1),
    ("The Way of Shadows", 2),
    ("Beyond the Shadows", 2),
]


async def seed_sample_data(store: EntityStore) -> bool:
    """
    Insert the sample authors and books.

    Each table is only seeded while it is empty, so calling this on every
    startup never duplicates rows.

    Returns:
        True if anything was inserted
    """
    seeded = False

    author_ids: list[int] = []
    if await store.count(Table.AUTHOR) == 0:
        for name in SAMPLE_AUTHORS:
            author_ids.append(await store.insert(Table.AUTHOR, {"name": name}))
        logger.info(f"Seeded {len(author_ids)} authors")
        seeded = True
    else:
        author_ids = [a.id for a in await store.find(Table.AUTHOR, limit=len(SAMPLE_AUTHORS))]

    if await store.count(Table.BOOK) == 0 and len(author_ids) == len(SAMPLE_AUTHORS):
        for name, author_index in SAMPLE_BOOKS:
            await store.insert(
                Table.BOOK,
                {"name": name, "author_id": author_ids[author_index]},
            )
        logger.info(f"Seeded {len(SAMPLE_BOOKS)} books")
        seeded = True

    return seeded
