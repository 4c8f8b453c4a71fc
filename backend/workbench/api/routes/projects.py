"""Project Routes — projectList, projectCreate, projectShow, projectUpdate, projectDelete over HTTP.

Invariants:
    - GET /projects requires team_id; name and visibility are optional filters
    - GET /projects/{id} returns visibility lower-cased (display form)
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from workbench.core.domain_types import IdentityId, ProjectVisibility
from workbench.infrastructure.database import get_db
from workbench.infrastructure.identity import get_current_identity
from workbench.schemas.project import (
    ProjectCreate, ProjectDetailResponse, ProjectFilter, ProjectResponse,
    ProjectUpdate,
)
from workbench.services.project_service import ProjectService

router = APIRouter(prefix="/api/v1/projects", tags=["projects"])


@router.get("", response_model=list[ProjectResponse])
async def list_projects(
    team_id: UUID,
    name: str | None = Query(None),
    visibility: ProjectVisibility | None = Query(None),
    identity: IdentityId = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    filters = ProjectFilter(team_id=team_id, name=name, visibility=visibility)
    return await ProjectService(db).list_projects(identity, filters)


@router.post(
    "", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED,
)
async def create_project(
    body: ProjectCreate,
    identity: IdentityId = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    return await ProjectService(db).create_project(identity, body)


@router.get("/{project_id}", response_model=ProjectDetailResponse)
async def show_project(
    project_id: UUID,
    identity: IdentityId = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    project = await ProjectService(db).show_project(identity, project_id)
    return ProjectDetailResponse.model_validate(project)


@router.put("/{project_id}")
async def update_project(
    project_id: UUID,
    body: ProjectUpdate,
    identity: IdentityId = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    await ProjectService(db).update_project(identity, project_id, body)
    return {"status": "ok"}


@router.delete("/{project_id}")
async def delete_project(
    project_id: UUID,
    identity: IdentityId = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    await ProjectService(db).delete_project(identity, project_id)
    return {"status": "ok"}
