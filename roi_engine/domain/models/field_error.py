"""Field-level validation error record."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class FieldError(BaseModel):
    """A single violated bound, routed to its input by ``field``."""

    model_config = ConfigDict(frozen=True)

    field: str
    message: str
