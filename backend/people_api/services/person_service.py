"""
People API · Person Service (Data Access)
===========================================

What:  Every read and write against the `people` collection.
Why:   Keeps query shapes and store error translation out of the routes.
How:   Each method issues exactly one Motor call on the collection it is
       given, then maps the result to a schema, a count, or NotFoundError.
Who:   Called by route handlers (collection injected by FastAPI) and by the
       seeding script.

Error Translation:
    PyMongoError (connectivity, duplicate email, ...) and InvalidId
    (malformed ObjectId string) become StoreFailureError after being logged
    with the operation name. NotFoundError is raised only by single-record
    operations; list queries return [] instead.

Atomic Updates:
    add_favorite_food() and set_age_by_name() both use find_one_and_update
    with ReturnDocument.AFTER, so concurrent appends cannot lose each other.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from people_api.exceptions import NotFoundError, StoreFailureError
from people_api.models.person import new_person
from people_api.schemas.person import PersonResponse, PersonSummary

logger = logging.getLogger(__name__)

# The update routes take no request body; these are the values they write.
FAVORITE_FOOD_TO_ADD = "hamburger"
RESET_AGE = 20

# GET /person/findByFood
BURRITO_FOOD = "burritos"
BURRITO_RESULT_LIMIT = 2

STORE_ERRORS = (PyMongoError, InvalidId)


def _store_failure(operation: str, error: Exception, **context: Any) -> StoreFailureError:
    logger.error(
        "Store error during %s: %s: %s | Context: %s",
        operation,
        type(error).__name__,
        str(error),
        context,
    )
    return StoreFailureError(
        context={"operation": operation, "original_error": type(error).__name__, **context},
    )


class PersonService:
    """
    Data access for the Person entity.

    Responsibilities:
        - find_by_name / find_one_by_food / find_burrito_lovers: reads
        - add_favorite_food / set_age_by_name: atomic updates
        - delete_by_id / delete_by_name: deletions
        - create_person / create_many_people: validated inserts
    """

    async def find_by_name(
        self, people: AsyncIOMotorCollection, name: str
    ) -> List[PersonResponse]:
        """All people whose name matches exactly. Empty list when none do."""
        try:
            documents = await people.find({"name": name}).to_list(length=None)
        except STORE_ERRORS as e:
            raise _store_failure("find_by_name", e, name=name) from e
        return [PersonResponse.from_document(doc) for doc in documents]

    async def find_one_by_food(
        self, people: AsyncIOMotorCollection, food: str
    ) -> PersonResponse:
        """
        First person with `food` among their favorite foods.

        Raises:
            NotFoundError: Nobody lists that food.
        """
        try:
            document = await people.find_one({"favoriteFoods": food})
        except STORE_ERRORS as e:
            raise _store_failure("find_one_by_food", e, food=food) from e

        if document is None:
            raise NotFoundError(
                message="No person found with that favorite food",
                context={"food": food},
            )
        return PersonResponse.from_document(document)

    async def add_favorite_food(
        self, people: AsyncIOMotorCollection, person_id: str
    ) -> PersonResponse:
        """
        Append FAVORITE_FOOD_TO_ADD to one person's favorite foods.

        Repeated calls keep appending; the list is not deduplicated.

        Raises:
            NotFoundError: No person has that id.
            StoreFailureError: The id is not a valid ObjectId, or the store failed.
        """
        try:
            document = await people.find_one_and_update(
                {"_id": ObjectId(person_id)},
                {"$push": {"favoriteFoods": FAVORITE_FOOD_TO_ADD}},
                return_document=ReturnDocument.AFTER,
            )
        except STORE_ERRORS as e:
            raise _store_failure("add_favorite_food", e, person_id=person_id) from e

        if document is None:
            raise NotFoundError(message="Person not found", context={"person_id": person_id})

        logger.info("Added '%s' to favorite foods of %s", FAVORITE_FOOD_TO_ADD, person_id)
        return PersonResponse.from_document(document)

    async def set_age_by_name(
        self, people: AsyncIOMotorCollection, name: str
    ) -> PersonResponse:
        """
        Set the first matching person's age to RESET_AGE and return the new document.

        Raises:
            NotFoundError: Nobody has that name.
        """
        try:
            document = await people.find_one_and_update(
                {"name": name},
                {"$set": {"age": RESET_AGE}},
                return_document=ReturnDocument.AFTER,
            )
        except STORE_ERRORS as e:
            raise _store_failure("set_age_by_name", e, name=name) from e

        if document is None:
            raise NotFoundError(message="Person not found.", context={"name": name})
        return PersonResponse.from_document(document)

    async def delete_by_id(
        self, people: AsyncIOMotorCollection, person_id: str
    ) -> PersonResponse:
        """
        Delete one person by id and return what was deleted.

        Raises:
            NotFoundError: No person has that id (including a second delete).
        """
        try:
            document = await people.find_one_and_delete({"_id": ObjectId(person_id)})
        except STORE_ERRORS as e:
            raise _store_failure("delete_by_id", e, person_id=person_id) from e

        if document is None:
            raise NotFoundError(message="Person not found.", context={"person_id": person_id})

        logger.info("Deleted person %s (%s)", person_id, document.get("name"))
        return PersonResponse.from_document(document)

    async def delete_by_name(self, people: AsyncIOMotorCollection, name: str) -> int:
        """
        Delete every person with this exact name.

        Returns:
            How many documents were removed (always > 0).

        Raises:
            NotFoundError: Nothing matched.
        """
        try:
            result = await people.delete_many({"name": name})
        except STORE_ERRORS as e:
            raise _store_failure("delete_by_name", e, name=name) from e

        if result.deleted_count == 0:
            raise NotFoundError(message="No person found.", context={"name": name})

        logger.info("Deleted %d people named %s", result.deleted_count, name)
        return result.deleted_count

    async def find_burrito_lovers(
        self, people: AsyncIOMotorCollection
    ) -> List[PersonSummary]:
        """
        People who like burritos: sorted by name, at most two, no age.

        Query:
            find({"favoriteFoods": "burritos"}, {"age": 0})
              .sort("name", 1).limit(2)
        """
        try:
            cursor = (
                people.find({"favoriteFoods": BURRITO_FOOD}, {"age": 0})
                .sort("name", ASCENDING)
                .limit(BURRITO_RESULT_LIMIT)
            )
            documents = await cursor.to_list(length=BURRITO_RESULT_LIMIT)
        except STORE_ERRORS as e:
            raise _store_failure("find_burrito_lovers", e) from e
        return [PersonSummary.from_document(doc) for doc in documents]

    async def create_person(
        self, people: AsyncIOMotorCollection, payload: Mapping[str, Any]
    ) -> PersonResponse:
        """
        Validate and insert one person.

        Raises:
            ValidationError: Payload breaks a field constraint (nothing written).
            StoreFailureError: Insert failed, e.g. duplicate email.
        """
        document = new_person(payload).to_document()
        try:
            result = await people.insert_one(document)
        except STORE_ERRORS as e:
            raise _store_failure("create_person", e, email=document.get("email")) from e

        logger.info("New person added to the database: %s", result.inserted_id)
        return PersonResponse.from_document({**document, "_id": result.inserted_id})

    async def create_many_people(
        self, people: AsyncIOMotorCollection, payloads: Iterable[Mapping[str, Any]]
    ) -> List[PersonResponse]:
        """
        Validate every payload, then insert them in one batch.

        A ValidationError on any payload aborts before the store is called.
        A store error aborts the batch; documents already written by an
        ordered insert stay written and are not reported individually.
        """
        documents: List[Dict[str, Any]] = [new_person(p).to_document() for p in payloads]
        if not documents:
            return []

        try:
            result = await people.insert_many(documents, ordered=True)
        except STORE_ERRORS as e:
            raise _store_failure("create_many_people", e, count=len(documents)) from e

        logger.info("People added to the database: %d", len(result.inserted_ids))
        return [
            PersonResponse.from_document({**doc, "_id": inserted_id})
            for doc, inserted_id in zip(documents, result.inserted_ids)
        ]


# ── Singleton Instance ────────────────────────────────────────────────────
# Stateless; the collection is passed in on every call
person_service = PersonService()
