"""FastAPI application for the pet store service."""

from __future__ import annotations

from typing import Any

from fastapi import Depends, FastAPI, Request

from . import __version__
from .config import PetStoreSettings
from .logger import configure_root_logger, get_logger
from .schemas import Pet
from .store import PetStore

logger = get_logger(__name__)


def get_store(request: Request) -> PetStore:
    """FastAPI dependency returning the store owned by the running app."""
    return request.app.state.store


def create_app(
    settings: PetStoreSettings | None = None,
    store: PetStore | None = None,
) -> FastAPI:
    """Build the HTTP adapter around a store.

    Args:
        settings: Service settings (defaults to ``PetStoreSettings.from_env()``)
        store: Store to serve. A fresh, empty one is created if omitted.
    """
    settings = settings or PetStoreSettings.from_env()
    configure_root_logger(settings.log_level, force=True)

    app = FastAPI(
        title="Pet Store",
        version=__version__,
        description="In-memory CRUD service for pets.",
    )
    app.state.settings = settings
    app.state.store = store if store is not None else PetStore()

    @app.get("/healthz")
    def healthcheck(pets: PetStore = Depends(get_store)) -> dict[str, Any]:
        return {
            "status": "ok",
            "storage": "in-memory",
            "pets": len(pets),
        }

    @app.get("/pets", response_model=list[Pet])
    def list_pets(pets: PetStore = Depends(get_store)):
        return pets.list_pets()

    @app.get("/pets/{pet_id}", response_model=Pet | None)
    def get_pet(pet_id: int, pets: PetStore = Depends(get_store)):
        # Absent pets come back as a JSON null with status 200.
        return pets.get_pet(pet_id)

    @app.put("/pets/{pet_id}", response_model=Pet)
    def replace_pet(pet_id: int, pet: Pet, pets: PetStore = Depends(get_store)):
        return pets.replace_pet(pet_id, pet)

    @app.post("/pets", response_model=Pet)
    def insert_pet(pet: Pet, pets: PetStore = Depends(get_store)):
        return pets.insert_pet(pet)

    logger.info("Pet store v%s ready (storage=in-memory)", __version__)
    return app
