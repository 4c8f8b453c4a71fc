"""Team Schemas — bounds for team create/update and the public response shape.

Invariants:
    - name: 3-50 chars
    - description: optional, free text
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class TeamCreate(BaseModel):
    name: str = Field(min_length=3, max_length=50)
    description: str | None = None


class TeamUpdate(BaseModel):
    name: str = Field(min_length=3, max_length=50)
    description: str | None = None


class TeamResponse(BaseModel):
    """Team response — public-facing team data."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str | None = None
    created_at: datetime
