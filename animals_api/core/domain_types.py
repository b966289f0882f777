"""Domain Types — enums shared by schemas, validator and store.

Invariants:
    - AnimalKind values are exactly the wire discriminator tags
    - No third kind exists; every consumer branches on both members

Design Decisions:
    - str Enum: compares equal to the raw tag and serializes without custom encoders
"""

from enum import Enum


class AnimalKind(str, Enum):
    """Discriminator tags for the Animal variant."""
    CAT = "cat"
    DOG = "dog"


ANIMAL_KINDS: tuple[str, ...] = tuple(kind.value for kind in AnimalKind)
