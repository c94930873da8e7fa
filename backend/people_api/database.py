"""
People API · Document Store Handle
====================================

What:  Owns the Motor client for MongoDB and hands out the `people` collection.
Why:   One place for connection logic; one explicitly constructed handle
       per process, attached to the FastAPI app state by the bootstrap.
How:   MongoStore wraps AsyncIOMotorClient. connect() creates the client,
       pings the server and ensures the unique email index. FastAPI
       dependencies read the handle from request.app.state.
Who:   Created by main.lifespan; used by routes via get_people_collection().
When:  Connected once at startup, closed at shutdown.

Startup Semantics:
    Connecting never raises. Success is logged as "Connected to MongoDB",
    failure (including a missing MONGO_URI) as "Could not connect to
    MongoDB". The listener starts either way; requests that need the
    store before the ping succeeded get a StoreFailureError (500).

Indexes:
    email: unique + sparse, so documents without an email never collide
    while duplicates are rejected at write time by the store itself.
"""

import logging
from typing import Optional

from fastapi import Depends, Request
from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

from people_api.config import Settings
from people_api.exceptions import StoreFailureError

logger = logging.getLogger(__name__)


class MongoStore:
    """
    Process-wide handle to the document store.

    Attributes:
        client:     Motor client, None until connect() managed to build one
        connected:  True once the startup ping succeeded; get_store refuses
                    the handle until then
    """

    def __init__(
        self,
        uri: str,
        database: str = "test",
        people_collection: str = "people",
        server_selection_timeout_ms: int = 5000,
    ) -> None:
        self.uri = uri
        self.database_name = database
        self.people_collection_name = people_collection
        self.server_selection_timeout_ms = server_selection_timeout_ms
        self.client: Optional[AsyncIOMotorClient] = None
        self.connected = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoStore":
        return cls(
            uri=settings.mongo_uri,
            database=settings.mongo_database,
            people_collection=settings.mongo_people_collection,
            server_selection_timeout_ms=settings.mongo_server_selection_timeout_ms,
        )

    async def connect(self) -> bool:
        """
        Build the client, ping the server, ensure indexes.

        Returns:
            True when the store answered the ping, False otherwise.
            Failures are logged, never raised.
        """
        if not self.uri.strip():
            logger.error("Could not connect to MongoDB: MONGO_URI is not set")
            return False

        try:
            self.client = AsyncIOMotorClient(
                self.uri,
                serverSelectionTimeoutMS=self.server_selection_timeout_ms,
            )
            await self.client.admin.command("ping")
            await self.people.create_index(
                [("email", ASCENDING)], unique=True, sparse=True
            )
        except (PyMongoError, ValueError) as e:
            # ValueError: some malformed URIs are rejected before the driver
            # wraps them in its own error types
            logger.error("Could not connect to MongoDB: %s", str(e))
            return False

        self.connected = True
        logger.info("Connected to MongoDB")
        return True

    @property
    def database(self) -> AsyncIOMotorDatabase:
        if self.client is None:
            raise StoreFailureError(
                message="Document store is not connected",
                context={"operation": "get_database"},
            )
        return self.client.get_default_database(default=self.database_name)

    @property
    def people(self) -> AsyncIOMotorCollection:
        return self.database[self.people_collection_name]

    def close(self) -> None:
        """Close the client and forget it. Safe to call more than once."""
        if self.client is not None:
            self.client.close()
            self.client = None
        self.connected = False


# ── FastAPI Dependencies ──────────────────────────────────────────────────

def get_store(request: Request) -> MongoStore:
    """Returns the handle the bootstrap attached to the app state, once connected."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise StoreFailureError(
            message="Document store was never initialized",
            context={"operation": "get_store"},
        )
    if not store.connected:
        raise StoreFailureError(
            message="Document store is not connected",
            context={"operation": "get_store"},
        )
    return store


def get_people_collection(
    store: MongoStore = Depends(get_store),
) -> AsyncIOMotorCollection:
    """
    FastAPI dependency that provides the `people` collection.

    Example usage in a route:
        @router.get("/people/{name}")
        async def find(name: str, people=Depends(get_people_collection)):
            ...
    """
    return store.people
