"""
People API · Application Package Initializer
==============================================

What: Marks the `people_api` directory as a Python package.
Why:  Enables module imports like `from people_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    This backend follows a thin layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │        Services (Data Access)       │  ← One store call per operation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Person construction + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Motor client handle
    └─────────────────────────────────────┘

    Routes map results to status codes; services translate store errors
    into application exceptions; the database layer owns the client handle.
"""

__version__ = "1.0.0"
