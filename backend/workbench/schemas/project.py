"""Project Schemas — bounds for project create/update/list and response shapes.

Invariants:
    - name: 3-50 chars; description: 3-255 chars
    - visibility: ProjectVisibility ("PUBLIC" | "PRIVATE"), unknown values rejected
    - ProjectDetailResponse lower-cases visibility for display; list/create keep stored form
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from workbench.core.domain_types import ProjectVisibility


class ProjectCreate(BaseModel):
    name: str = Field(min_length=3, max_length=50)
    description: str = Field(min_length=3, max_length=255)
    team_id: UUID
    visibility: ProjectVisibility


class ProjectUpdate(BaseModel):
    name: str = Field(min_length=3, max_length=50)
    description: str = Field(min_length=3, max_length=255)
    visibility: ProjectVisibility


class ProjectFilter(BaseModel):
    """projectList filter — team_id required, the rest optional."""
    team_id: UUID
    name: str | None = None
    visibility: ProjectVisibility | None = None


class ProjectResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    team_id: UUID
    name: str
    description: str
    visibility: str
    created_at: datetime
    updated_at: datetime | None = None


class ProjectDetailResponse(ProjectResponse):
    """projectShow response — visibility in display form."""

    @field_validator("visibility")
    @classmethod
    def lower_visibility(cls, v: str) -> str:
        return v.lower()
