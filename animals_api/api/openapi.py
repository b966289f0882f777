"""API Description — OpenAPI document derived from the Animal schemas.

Invariants:
    - Components include Cat, Dog, Animal (discriminated on "type"),
      ErrorResponse and NotFoundResponse
    - POST /animals documents an Animal request body
    - No 422 responses: request validation failures are answered with 400
    - Document built once per app and cached on app.openapi_schema

Design Decisions:
    - Post-process FastAPI's generated document instead of hand-writing paths:
      routes stay the single source for methods, summaries and responses
    - Animal component produced by a TypeAdapter over the same annotated union
      the routes use, so validation and documentation cannot drift
"""

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import TypeAdapter

from animals_api.config import get_settings
from animals_api.schemas.animal import Animal

REF_TEMPLATE = "#/components/schemas/{model}"

_FASTAPI_VALIDATION_SCHEMAS = ("HTTPValidationError", "ValidationError")


def build_openapi_document(app: FastAPI) -> dict:
    """Generate (or return the cached) OpenAPI document for the app."""
    if app.openapi_schema:
        return app.openapi_schema

    settings = get_settings()
    document = get_openapi(
        title=settings.app_title,
        version=settings.app_version,
        description=settings.app_description,
        routes=app.routes,
        servers=[{"url": settings.server_url, "description": "Development server"}],
    )
    schemas = document.setdefault("components", {}).setdefault("schemas", {})
    _register_animal_schema(schemas)
    _document_create_body(document)
    _drop_validation_responses(document, schemas)

    app.openapi_schema = document
    return document


def install_openapi(app: FastAPI) -> None:
    """Replace app.openapi with the Animal-aware generator."""
    app.openapi = lambda: build_openapi_document(app)


def _register_animal_schema(schemas: dict) -> None:
    animal_schema = TypeAdapter(Animal).json_schema(ref_template=REF_TEMPLATE)
    schemas.update(animal_schema.pop("$defs", {}))
    animal_schema["description"] = "An animal (cat or dog)"
    schemas["Animal"] = animal_schema


def _document_create_body(document: dict) -> None:
    create_op = document["paths"]["/animals"]["post"]
    create_op["requestBody"] = {
        "required": True,
        "content": {
            "application/json": {
                "schema": {"$ref": REF_TEMPLATE.format(model="Animal")},
            },
        },
    }


def _drop_validation_responses(document: dict, schemas: dict) -> None:
    for path_item in document["paths"].values():
        for operation in path_item.values():
            operation.get("responses", {}).pop("422", None)
    for name in _FASTAPI_VALIDATION_SCHEMAS:
        schemas.pop(name, None)
