"""
People API · Root Route
=========================

What:  GET / returns a fixed welcome text.
Why:   The only sign of life the service offers; there is no health endpoint.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Root"])

WELCOME_TEXT = "Welcome to the API!"


@router.get("/", response_class=PlainTextResponse, summary="Welcome message")
async def welcome() -> str:
    return WELCOME_TEXT
