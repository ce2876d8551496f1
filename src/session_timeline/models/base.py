"""Base Pydantic schema for the project.

Provides a common base class for all Pydantic models in session-timeline
with shared configuration and validation behavior.
"""

from pydantic import BaseModel, ConfigDict

__all__ = ["BaseSchema"]


class BaseSchema(BaseModel):
    """Base model for all Pydantic schemas.

    Provides common configuration for all models in the project:
    - from_attributes: Accept attribute-bearing objects (ORM rows, dataclasses)
    - populate_by_name: Accept field names as well as wire aliases
    - frozen: Engine output is read-only once created
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        frozen=True,
    )
