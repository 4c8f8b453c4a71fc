"""API Schemas — request definitions submitted under a project.

Invariants:
    - name: optional, 3-50 chars when present
    - description: optional, 3-255 chars when present
    - method / status: closed enums (ApiMethod, ApiStatus)
    - params/body/headers/authorization: JSON objects, contents not inspected
    - pre_request_script/post_response_script: opaque strings, never executed
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from workbench.core.domain_types import ApiMethod, ApiStatus


class ApiCreate(BaseModel):
    name: str | None = Field(None, min_length=3, max_length=50)
    description: str | None = Field(None, min_length=3, max_length=255)
    endpoint: str
    method: ApiMethod
    params: dict[str, Any]
    body: dict[str, Any]
    headers: dict[str, Any]
    authorization: dict[str, Any]
    pre_request_script: str
    post_response_script: str
    tags: list[str]
    versions: list[str]
    order: int
    status: ApiStatus | None = None
    project_id: UUID


class ApiFilter(BaseModel):
    """apiList filter — project_id required."""
    project_id: UUID
    name: str | None = None


class ApiResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    project_id: UUID
    name: str | None = None
    description: str | None = None
    endpoint: str
    method: str
    params: dict[str, Any]
    body: dict[str, Any]
    headers: dict[str, Any]
    authorization: dict[str, Any]
    pre_request_script: str
    post_response_script: str
    tags: list[str]
    versions: list[str]
    order: int
    status: str | None = None
    created_at: datetime
