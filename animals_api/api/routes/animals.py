"""Animal Routes — list, get-by-name and create endpoints over the AnimalStore.

Invariants:
    - Only create mutates the store, and only after validate_animal() succeeds
    - Create answers 201 with an empty body and Location: /animals/<name>
    - Unknown names raise AnimalNotFoundError (404), bad input raises
      InvalidAnimalDataError (400); both rendered by the global handlers

Design Decisions:
    - Raw JSON body (Any) instead of a typed parameter: validation runs in the
      pure core and the route branches on its result; a null or empty body
      is validated like any other non-object and fails as no matching variant
    - "{name:path}" converter: names containing "/" arrive percent-encoded in
      Location and decode back to one parameter
    - Store injected via Depends(get_animal_store) from app.state: tests and
      production share one wiring path
    - async handlers without awaits: each request runs start-to-finish on the
      event loop, so appends never interleave mid-operation
"""

import logging
from typing import Any
from urllib.parse import quote

from fastapi import APIRouter, Body, Depends, Request, Response, status

from animals_api.core.animal_store import AnimalStore
from animals_api.core.errors import AnimalNotFoundError, InvalidAnimalDataError
from animals_api.core.validate_animal import classify, validate_animal
from animals_api.schemas.animal import Animal, ErrorResponse, NotFoundResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/animals", tags=["Animals"])


def get_animal_store(request: Request) -> AnimalStore:
    """Return the process-wide store created in main.py."""
    return request.app.state.animal_store


def animal_location(name: str) -> str:
    """Get-by-name path for an animal, name encoded as one path segment."""
    return f"{router.prefix}/{quote(name, safe='')}"


@router.get(
    "", response_model=list[Animal], summary="List all animals",
    responses={200: {"description": "A list of animals"}},
)
async def list_animals(store: AnimalStore = Depends(get_animal_store)):
    return store.list_all()


@router.get(
    "/{name:path}", response_model=Animal, summary="Get animal by name",
    responses={
        200: {"description": "Animal found"},
        404: {"model": NotFoundResponse, "description": "Animal not found"},
    },
)
async def get_animal(name: str, store: AnimalStore = Depends(get_animal_store)):
    animal = store.find_by_name(name)
    if animal is None:
        logger.debug(f"No animal named {name!r}", extra={"animal_name": name})
        raise AnimalNotFoundError(name)
    return animal


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_class=Response,
    summary="Add a new animal",
    responses={
        201: {
            "description": (
                "Animal created. Location header contains the URI of the new animal."
            ),
            "headers": {
                "Location": {
                    "description": "URI of the newly created animal",
                    "schema": {"type": "string", "example": "/animals/Fluffy"},
                },
            },
        },
        400: {"model": ErrorResponse, "description": "Invalid animal data"},
    },
)
async def create_animal(
    payload: Any = Body(None),
    store: AnimalStore = Depends(get_animal_store),
):
    result = validate_animal(payload)
    if not result.ok:
        logger.info(
            f"Rejected animal: {result.errors}",
            extra={"error_code": "VALIDATION_ERROR"},
        )
        raise InvalidAnimalDataError(result.errors)

    animal = result.animal
    kind = classify(animal)
    store.append(animal)
    logger.info(
        f"Created {kind.value} {animal.name!r}",
        extra={
            "animal_name": animal.name,
            "animal_type": kind.value,
            "store_size": len(store),
        },
    )
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": animal_location(animal.name)},
    )
