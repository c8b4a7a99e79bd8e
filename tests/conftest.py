"""
pytest Fixtures for Bookshelf API Tests

This file contains shared fixtures used across all test files.

FIXTURE OVERVIEW:
=================
- settings: Settings pointing at a throwaway SQLite file in tmp_path
- store: An opened entity store, parametrized over both backends
  ("sql" and "orm") so every store-level test runs against each one
- sample_library: Two authors with three books each, inserted in a
  known order (author ids 1-2, book ids 1-6)
- client: TestClient for a full application seeded with the sample data
  inserted at startup (3 authors, 8 books)
- empty_client: TestClient for an app with empty tables

Each test gets its own database file, so tests never see each other's rows.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
# so the module-level app never points at the development database
import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"

from collections.abc import AsyncGenerator, Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from bookshelf.config import Settings
from bookshelf.main import create_app
from bookshelf.store import AuthorRecord, BookRecord, EntityStore, Table, create_store


def make_settings(tmp_path: Path, **overrides) -> Settings:
    """Settings for a test database file inside tmp_path."""
    values = {
        "database_url": f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        "seed_on_startup": False,
        "graphql_ide_enabled": False,
    }
    values.update(overrides)
    return Settings(**values)


# =============================================================================
# STORE FIXTURES
# =============================================================================


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings for a fresh database file."""
    return make_settings(tmp_path)


@pytest.fixture(params=["sql", "orm"])
async def store(request, tmp_path: Path) -> AsyncGenerator[EntityStore, None]:
    """
    Create and open an entity store on an empty database.

    Parametrized: tests using this fixture run once per backend.
    """
    store = create_store(make_settings(tmp_path, store_backend=request.param))
    await store.open()

    yield store

    await store.close()


@pytest.fixture
async def sample_library(store: EntityStore) -> dict[str, list]:
    """
    Two authors with three books each.

    Returns:
        {"authors": [AuthorRecord, ...], "books": [BookRecord, ...]}
    """
    authors = []
    for name in ["J.K. Rowling", "J.R.R. Tolkien"]:
        author_id = await store.insert(Table.AUTHOR, {"name": name})
        authors.append(AuthorRecord(id=author_id, name=name))

    titles = [
        ("Philosopher's Stone", authors[0].id),
        ("Chamber of Secrets", authors[0].id),
        ("Prisoner of Azkaban", authors[0].id),
        ("The Fellowship of the Ring", authors[1].id),
        ("The Two Towers", authors[1].id),
        ("The Return of the King", authors[1].id),
    ]
    books = []
    for name, author_id in titles:
        book_id = await store.insert(Table.BOOK, {"name": name, "author_id": author_id})
        books.append(BookRecord(id=book_id, name=name, author_id=author_id))

    return {"authors": authors, "books": books}


# =============================================================================
# APPLICATION FIXTURES
# =============================================================================


@pytest.fixture(params=["sql", "orm"])
def client(request, tmp_path: Path) -> Generator[TestClient, None, None]:
    """
    Create a test client for an app seeded with the sample data.

    Entering the TestClient context runs the lifespan, which opens the
    store and seeds it; leaving it closes the store.
    """
    app = create_app(
        make_settings(tmp_path, store_backend=request.param, seed_on_startup=True)
    )

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def empty_client(tmp_path: Path) -> Generator[TestClient, None, None]:
    """Test client for an app with empty tables."""
    app = create_app(make_settings(tmp_path))

    with TestClient(app) as test_client:
        yield test_client
