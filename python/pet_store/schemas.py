"""Pydantic schemas for the pet store API."""

from pydantic import BaseModel, ConfigDict


class Pet(BaseModel):
    """A pet record.

    Only ``id`` is known to the service; every other attribute is carried
    through untouched.
    """

    id: int | None = None

    model_config = ConfigDict(extra="allow")
