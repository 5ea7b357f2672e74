"""In-memory pet storage."""

from __future__ import annotations

from threading import Lock

from .logger import get_logger
from .schemas import Pet

logger = get_logger(__name__)


class PetStore:
    """Holds pets in a process-local mapping keyed by integer id.

    All operations take the same lock, so id assignment in ``insert_pet`` is
    atomic even when requests are served from several threads. Pets are
    copied on the way in and on the way out; callers never share state with
    the store.
    """

    def __init__(self) -> None:
        self._pets: dict[int, Pet] = {}
        self._lock = Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._pets)

    def list_pets(self) -> list[Pet]:
        """Return every stored pet, in no particular order."""
        with self._lock:
            return [pet.model_copy(deep=True) for pet in self._pets.values()]

    def get_pet(self, pet_id: int) -> Pet | None:
        """Return the pet stored under ``pet_id``, or None if there is none."""
        with self._lock:
            pet = self._pets.get(pet_id)
            return pet.model_copy(deep=True) if pet is not None else None

    def replace_pet(self, pet_id: int, pet: Pet) -> Pet:
        """Store ``pet`` under ``pet_id``, creating or overwriting the entry.

        Any id carried by ``pet`` is ignored; the stored record always has
        ``id == pet_id``.
        """
        stored = pet.model_copy(update={"id": pet_id}, deep=True)
        with self._lock:
            created = pet_id not in self._pets
            self._pets[pet_id] = stored
        logger.debug("%s pet id=%s", "Created" if created else "Replaced", pet_id)
        return stored.model_copy(deep=True)

    def insert_pet(self, pet: Pet) -> Pet:
        """Store ``pet`` under the next free id and return the stored record.

        The next id is one more than the highest stored id, or 0 for an empty
        store. A caller-supplied id is overwritten.
        """
        with self._lock:
            new_id = max(self._pets, default=-1) + 1
            stored = pet.model_copy(update={"id": new_id}, deep=True)
            self._pets[new_id] = stored
        logger.debug("Inserted pet id=%s", new_id)
        return stored.model_copy(deep=True)
