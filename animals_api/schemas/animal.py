"""Animal Schemas — Pydantic models for the Cat/Dog tagged variant and error bodies.

Invariants:
    - Cat.type is always "cat", Dog.type is always "dog"; no other tag validates
    - name non-empty, age > 0, livesLeft in [0, 9], breed non-empty
    - Numbers are strict ints: "3", 3.5 and true are rejected
    - Records are frozen once validated; unknown input keys are dropped

Design Decisions:
    - Literal discriminator + Field(discriminator="type"): Pydantic picks the
      variant from the tag and the OpenAPI document gets a real discriminator
    - lives_left attribute with "livesLeft" alias: Python naming inside, wire
      naming outside
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from animals_api.core.domain_types import AnimalKind


class Cat(BaseModel):
    """A cat, tracking how many lives it has left."""

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "description": "A cat animal",
            "example": {"type": "cat", "name": "Nero", "age": 2, "livesLeft": 9},
        },
    )

    type: Literal["cat"]
    name: str = Field(min_length=1)
    age: int = Field(gt=0)
    lives_left: int = Field(alias="livesLeft", ge=0, le=9)


class Dog(BaseModel):
    """A dog, tracking its breed."""

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        json_schema_extra={
            "description": "A dog animal",
            "example": {"type": "dog", "name": "Buddy", "age": 5, "breed": "Labrador"},
        },
    )

    type: Literal["dog"]
    name: str = Field(min_length=1)
    age: int = Field(gt=0)
    breed: str = Field(min_length=1)


Animal = Annotated[Union[Cat, Dog], Field(discriminator="type")]

# Concrete model per discriminator tag
ANIMAL_MODELS: dict[str, type[BaseModel]] = {
    AnimalKind.CAT: Cat,
    AnimalKind.DOG: Dog,
}


class ErrorResponse(BaseModel):
    """Error body for rejected input."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "Invalid animal data",
                "details": {"name": ["Name is required"]},
            },
        },
    )

    error: str
    details: Any = None


class NotFoundResponse(BaseModel):
    """Error body for an unknown animal name."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"error": "Animal not found"}},
    )

    error: str
