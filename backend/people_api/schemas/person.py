"""
People API · Pydantic Response Schemas
========================================

What:  Pydantic models defining the JSON the API returns for people.
Why:   Stored documents carry a BSON ObjectId and wire-style keys; these
       models turn them into plain JSON and drive the OpenAPI docs.
How:   Built with model_validate(document); FastAPI serializes them by alias,
       so `_id` and `favoriteFoods` keep their stored names on the wire.
Who:   Returned by PersonService and declared as route response models.

Two shapes:
    PersonSummary   every field except `age` (used by /person/findByFood)
    PersonResponse  the full document
"""

from typing import Any, Dict, List, Optional, Union

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator


class PersonSummary(BaseModel):
    """A person without the `age` field."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id", description="Store-assigned identifier (24 hex chars)")
    name: str = Field(description="Person's name (not unique)")
    favorite_foods: List[str] = Field(
        default_factory=list,
        alias="favoriteFoods",
        description="Favorite foods in insertion order",
    )
    email: Optional[str] = Field(default=None, description="Unique email, if any")

    @field_validator("id", mode="before")
    @classmethod
    def stringify_object_id(cls, v: Any) -> Any:
        """ObjectId → hex string so the value is JSON-serializable."""
        if isinstance(v, ObjectId):
            return str(v)
        return v

    @classmethod
    def from_document(cls, document: Dict[str, Any]):
        return cls.model_validate(document)


class PersonResponse(PersonSummary):
    """A full person document."""

    # Writes only ever store ints; reads echo whatever number is stored
    age: Union[int, float] = Field(description="Age in years (never negative)")
