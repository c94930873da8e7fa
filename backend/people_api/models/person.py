"""
People API · Person Document Model
====================================

What:  The Person entity as it is written to the `people` collection.
Why:   Field constraints are checked in Python before the store sees the
       document, so a bad payload never costs a round trip.
How:   A Pydantic model declares the constraints; new_person() is the only
       construction path and turns pydantic errors into ValidationError.
Who:   Used by PersonService for inserts and by the seeding script.

Field Constraints:
    name           required, non-empty text, not unique
    age            required integer, >= 0
    favoriteFoods  list of text, defaults to []
    email          optional text; uniqueness is left to the store's index

The `_id` field is never set here. The store assigns it on insert.
"""

from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from people_api.exceptions import ValidationError


class Person(BaseModel):
    """A person as stored in MongoDB (without the store-assigned `_id`)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(min_length=1)
    age: int = Field(ge=0)
    favorite_foods: List[str] = Field(default_factory=list, alias="favoriteFoods")
    email: Optional[str] = None

    def to_document(self) -> Dict[str, Any]:
        """Document body for insert_one/insert_many, keyed by wire names."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def __repr__(self) -> str:
        return f"<Person(name='{self.name}', age={self.age}, email='{self.email}')>"


def new_person(payload: Mapping[str, Any]) -> Person:
    """
    Build a Person from an untrusted mapping.

    Args:
        payload: Keys as they appear on the wire (`favoriteFoods`) or as
                 Python attribute names (`favorite_foods`).

    Returns:
        A Person that satisfies every field constraint.

    Raises:
        ValidationError: On the first violated constraint. The full list of
                         pydantic errors is kept in `context["errors"]`.
    """
    try:
        return Person.model_validate(dict(payload))
    except PydanticValidationError as e:
        errors = e.errors()
        first = errors[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        raise ValidationError(
            message=f"Invalid person field '{field}': {first['msg']}",
            field=field,
            context={"errors": [{"loc": err["loc"], "msg": err["msg"]} for err in errors]},
        ) from e
