"""
People API · Sample Data Seeding
==================================

What:  Inserts a fixed set of sample people in one batch.
Why:   Gives a fresh database something for the routes to find.
How:   PersonService.create_many_people() validates all payloads, then
       issues a single insert_many.
When:  Normally never. Runs at startup when SEED_ON_STARTUP=true, or by
       hand through the `people-api-seed` console script.

Failure Semantics:
    Any error (validation, duplicate email on a second run, lost
    connection) aborts the batch and is logged. Nothing is rolled back
    and no per-record report is produced.
"""

import asyncio
import logging
import sys
from typing import Any, Dict, List

from people_api.config import settings
from people_api.database import MongoStore
from people_api.exceptions import PeopleApiError
from people_api.services.person_service import person_service

logger = logging.getLogger(__name__)

SAMPLE_PEOPLE: List[Dict[str, Any]] = [
    {
        "name": "John",
        "age": 30,
        "favoriteFoods": ["Pizza", "Burger"],
        "email": "john@example.com",
    },
    {
        "name": "Jane",
        "age": 28,
        "favoriteFoods": ["Salad", "Sushi"],
        "email": "jane@example.com",
    },
    {
        "name": "Alice",
        "age": 25,
        "favoriteFoods": ["Pasta", "Ice Cream"],
        "email": "alice@example.com",
    },
    {
        "name": "Bob",
        "age": 35,
        "favoriteFoods": ["Steak", "Fries"],
        "email": "bob@example.com",
    },
]


async def seed_people(store: MongoStore, people: List[Dict[str, Any]] = SAMPLE_PEOPLE) -> int:
    """
    Insert `people` into the store's collection.

    Returns:
        Number of documents inserted; 0 when the batch failed.
    """
    try:
        saved = await person_service.create_many_people(store.people, people)
    except PeopleApiError as e:
        logger.error("Error adding people: %s | Context: %s", e.message, e.context)
        return 0

    logger.info("People added to the database: %s", [p.name for p in saved])
    return len(saved)


async def _seed_from_settings() -> int:
    store = MongoStore.from_settings(settings)
    try:
        if not await store.connect():
            return 0
        return await seed_people(store)
    finally:
        store.close()


def main() -> None:
    """Console entry point: seed the configured database once."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    inserted = asyncio.run(_seed_from_settings())
    sys.exit(0 if inserted else 1)


if __name__ == "__main__":
    main()
