"""Animal Store — ordered, process-local collection of validated animals.

Invariants:
    - Records kept in insertion order: seed records first, then appends
    - append() accepts only validated Cat/Dog instances; no duplicate-name check
    - find_by_name() is exact and case-sensitive, returns the oldest match or None
    - reset_to_seed() is for test isolation only; no production path calls it

Design Decisions:
    - Explicit object held on app.state over a module-level list: one owner,
      one lifecycle (constructed once at startup, seeded, injected into routes)
    - In-memory only: state lost on restart, single process, no locks needed
      because appends never rewrite existing entries
"""

from animals_api.schemas.animal import Cat, Dog


def seed_animals() -> list[Cat | Dog]:
    """The fixed initial content of every store."""
    return [
        Cat(type="cat", name="Whiskers", age=3, livesLeft=7),
        Dog(type="dog", name="Buddy", age=5, breed="Labrador"),
    ]


class AnimalStore:
    """Ordered in-memory collection of animals."""

    def __init__(self, animals: list[Cat | Dog] | None = None):
        self._animals: list[Cat | Dog] = (
            list(animals) if animals is not None else seed_animals()
        )

    def __len__(self) -> int:
        return len(self._animals)

    def list_all(self) -> list[Cat | Dog]:
        """All animals in insertion order. Returns a copy."""
        return list(self._animals)

    def find_by_name(self, name: str) -> Cat | Dog | None:
        return next((a for a in self._animals if a.name == name), None)

    def append(self, animal: Cat | Dog) -> None:
        self._animals.append(animal)

    def reset_to_seed(self) -> None:
        self._animals = seed_animals()
