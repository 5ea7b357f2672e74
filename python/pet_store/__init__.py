"""In-memory pet store service."""

__version__ = "0.1.0"

from .config import PetStoreSettings
from .errors import PetStoreConfigError, PetStoreError
from .schemas import Pet
from .server import create_app
from .store import PetStore

__all__ = [
    "__version__",
    # Store
    "Pet",
    "PetStore",
    # Service
    "PetStoreSettings",
    "create_app",
    # Errors
    "PetStoreError",
    "PetStoreConfigError",
]
