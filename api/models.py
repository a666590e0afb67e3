"""Pydantic schema for the Employee record."""
from pydantic import BaseModel, Field


class Employee(BaseModel):
    """Employee record as stored and as exchanged over HTTP.

    ``id`` is assigned by the store; a value sent by the client is never
    trusted (POST drops it, PUT replaces it with the URL id).
    The name and email rules live in api.validation so that every failing
    field can be reported together in one 400 field-error map.
    """

    id: int | None = None
    name: str | None = None
    position: str | None = None
    # inf/nan cannot be written back as JSON
    salary: float = Field(0.0, allow_inf_nan=False)
    email: str | None = None

    model_config = {"from_attributes": True}
