"""Animal Validation — pure validation of untyped input against the Cat/Dog variant.

Invariants:
    - validate_animal() never raises for malformed input; it returns a ValidationResult
    - An unknown, missing or non-string tag fails as "no matching variant"
      before any field-level rule runs
    - Field-error tree maps wire field name -> list of human-readable messages
    - classify() is a pure read of the discriminator; it never re-validates

Design Decisions:
    - Tag dispatch done here, then the concrete Pydantic model validates fields:
      a bad tag never produces field errors for either shape
    - Constraint messages rewritten per (field, error type); anything unmapped
      keeps Pydantic's own message ("Field required", "Input should be ...")
"""

from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from animals_api.core.domain_types import ANIMAL_KINDS, AnimalKind
from animals_api.schemas.animal import ANIMAL_MODELS, Cat, Dog

NO_MATCHING_VARIANT = (
    f"No matching variant: type must be one of {', '.join(repr(k) for k in ANIMAL_KINDS)}"
)

_CONSTRAINT_MESSAGES: dict[tuple[str, str], str] = {
    ("name", "string_too_short"): "Name is required",
    ("age", "greater_than"): "Age must be a positive integer",
    ("livesLeft", "greater_than_equal"): "Lives left cannot be negative",
    ("livesLeft", "less_than_equal"): "Cats have a maximum of 9 lives",
    ("breed", "string_too_short"): "Breed is required",
}


@dataclass(frozen=True)
class ValidationResult:
    """Either a validated animal or a field-error tree, never both."""
    animal: Cat | Dog | None = None
    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.animal is not None


def validate_animal(payload: Any) -> ValidationResult:
    """Validate parsed JSON as a Cat or Dog, selected by its `type` tag."""
    kind = _discriminate(payload)
    if kind is None:
        return ValidationResult(errors={"type": [NO_MATCHING_VARIANT]})
    try:
        animal = ANIMAL_MODELS[kind].model_validate(payload)
    except ValidationError as exc:
        return ValidationResult(errors=build_error_tree(exc.errors()))
    return ValidationResult(animal=animal)


def build_error_tree(errors: list[dict]) -> dict[str, list[str]]:
    """Group Pydantic error dicts by dotted field path."""
    tree: dict[str, list[str]] = {}
    for err in errors:
        path = ".".join(str(part) for part in err["loc"]) or "_root"
        message = _CONSTRAINT_MESSAGES.get((path, err["type"]), err["msg"])
        tree.setdefault(path, []).append(message)
    return tree


def classify(animal: Cat | Dog) -> AnimalKind:
    """Return the discriminator of an already-validated animal."""
    return AnimalKind(animal.type)


def is_cat(animal: Cat | Dog) -> bool:
    return classify(animal) is AnimalKind.CAT


def is_dog(animal: Cat | Dog) -> bool:
    return classify(animal) is AnimalKind.DOG


def _discriminate(payload: Any) -> AnimalKind | None:
    if not isinstance(payload, dict):
        return None
    tag = payload.get("type")
    if not isinstance(tag, str) or tag not in ANIMAL_KINDS:
        return None
    return AnimalKind(tag)
