#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with the sample authors and books.

USAGE:
    # From the project root with venv activated
    python scripts/seed_data.py

    # Drop and recreate the tables first
    python scripts/seed_data.py --reset

This script:
1. Builds the entity store configured by the app settings
2. Creates the tables (optionally dropping them first)
3. Inserts the sample data into empty tables
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bookshelf.config import get_settings
from bookshelf.database import drop_tables
from bookshelf.services.seed import SAMPLE_AUTHORS, SAMPLE_BOOKS, seed_sample_data
from bookshelf.store import create_store

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def seed_database(reset: bool = False) -> None:
    """
    Main function to seed the database.

    Args:
        reset: If True, drops the tables before seeding.
    """
    settings = get_settings()
    store = create_store(settings)

    logger.info(f"Seeding {settings.database_url} ({settings.store_backend} store)")

    try:
        if reset:
            await drop_tables(store.engine)
            logger.info("Tables dropped")

        await store.open()

        if await seed_sample_data(store):
            logger.info(
                f"Seeding completed: {len(SAMPLE_AUTHORS)} authors, "
                f"{len(SAMPLE_BOOKS)} books"
            )
        else:
            logger.info("Tables already contain data, nothing inserted")
    finally:
        await store.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the bookshelf database")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop and recreate the tables before seeding",
    )
    args = parser.parse_args()

    asyncio.run(seed_database(reset=args.reset))


if __name__ == "__main__":
    main()
