"""Custom exceptions for the pet store service."""

from __future__ import annotations


class PetStoreError(RuntimeError):
    """Base error for the pet store service."""


class PetStoreConfigError(PetStoreError):
    """Raised when the service environment/configuration is invalid."""
