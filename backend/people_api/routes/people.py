"""
People API · People Route Handlers
====================================

What:  Find, update and delete routes for the `people` collection.
Why:   The whole public contract of the service lives here.
How:   Each handler pulls its path parameter, calls one PersonService
       method with the injected collection, and returns JSON or plain text.
Who:   Called by API clients.

Response Bodies:
    Found data          → JSON (PersonResponse / PersonSummary, by alias)
    Delete confirmation → plain text
    Not found           → plain text, 404 (NotFoundError handler)
    Store failure       → plain text, 500 (StoreFailureError handler)
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from motor.motor_asyncio import AsyncIOMotorCollection

from people_api.database import get_people_collection
from people_api.schemas.person import PersonResponse, PersonSummary
from people_api.services.person_service import person_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["People"])

_TEXT_RESPONSES = {
    404: {"description": "Nothing matched", "content": {"text/plain": {}}},
    500: {"description": "Store failure", "content": {"text/plain": {}}},
}


@router.get(
    "/people/{name}",
    response_model=List[PersonResponse],
    response_model_exclude_none=True,
    responses={500: _TEXT_RESPONSES[500]},
    summary="Find people by exact name",
)
async def find_people_by_name(
    name: str,
    people: AsyncIOMotorCollection = Depends(get_people_collection),
) -> List[PersonResponse]:
    """Zero matches is a 200 with an empty array, never a 404."""
    return await person_service.find_by_name(people, name)


@router.get(
    "/person/findByFood",
    response_model=List[PersonSummary],
    response_model_exclude_none=True,
    responses={500: _TEXT_RESPONSES[500]},
    summary="Find up to two burrito lovers",
    description=(
        "People whose favorite foods include 'burritos', sorted by name "
        "ascending, at most two, with the age field left out."
    ),
)
async def find_burrito_lovers(
    people: AsyncIOMotorCollection = Depends(get_people_collection),
) -> List[PersonSummary]:
    return await person_service.find_burrito_lovers(people)


@router.get(
    "/person/food/{food}",
    response_model=PersonResponse,
    response_model_exclude_none=True,
    responses=_TEXT_RESPONSES,
    summary="Find one person by favorite food",
)
async def find_person_by_food(
    food: str,
    people: AsyncIOMotorCollection = Depends(get_people_collection),
) -> PersonResponse:
    return await person_service.find_one_by_food(people, food)


@router.put(
    "/person/{person_id}/favoriteFood",
    response_model=PersonResponse,
    response_model_exclude_none=True,
    responses=_TEXT_RESPONSES,
    summary="Append 'hamburger' to a person's favorite foods",
)
async def add_favorite_food(
    person_id: str,
    people: AsyncIOMotorCollection = Depends(get_people_collection),
) -> PersonResponse:
    """
    The appended value is always the literal "hamburger"; the route takes
    no body. Every call appends again.
    """
    return await person_service.add_favorite_food(people, person_id)


@router.put(
    "/person/updateAge/{person_name}",
    response_model=PersonResponse,
    response_model_exclude_none=True,
    responses=_TEXT_RESPONSES,
    summary="Set a person's age to 20",
)
async def update_age(
    person_name: str,
    people: AsyncIOMotorCollection = Depends(get_people_collection),
) -> PersonResponse:
    return await person_service.set_age_by_name(people, person_name)


@router.delete(
    "/person/delete/{person_id}",
    response_class=PlainTextResponse,
    responses=_TEXT_RESPONSES,
    summary="Delete a person by id",
)
async def delete_person(
    person_id: str,
    people: AsyncIOMotorCollection = Depends(get_people_collection),
) -> PlainTextResponse:
    deleted = await person_service.delete_by_id(people, person_id)
    return PlainTextResponse(f"Successfully deleted: {deleted.name}")


@router.delete(
    "/person/deleteByName/{name}",
    response_class=PlainTextResponse,
    responses=_TEXT_RESPONSES,
    summary="Delete every person with a name",
)
async def delete_people_by_name(
    name: str,
    people: AsyncIOMotorCollection = Depends(get_people_collection),
) -> PlainTextResponse:
    count = await person_service.delete_by_name(people, name)
    return PlainTextResponse(f"Successfully deleted {count} people named {name}.")
