"""Team Routes — teamList, teamCreate, teamShow, teamUpdate, teamDelete over HTTP."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from workbench.core.domain_types import IdentityId
from workbench.infrastructure.database import get_db
from workbench.infrastructure.identity import get_current_identity
from workbench.schemas.team import TeamCreate, TeamResponse, TeamUpdate
from workbench.services.team_service import TeamService

router = APIRouter(prefix="/api/v1/teams", tags=["teams"])


@router.get("", response_model=list[TeamResponse])
async def list_teams(
    identity: IdentityId = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    return await TeamService(db).list_teams(identity)


@router.post(
    "", response_model=TeamResponse, status_code=status.HTTP_201_CREATED,
)
async def create_team(
    body: TeamCreate,
    identity: IdentityId = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    return await TeamService(db).create_team(identity, body)


@router.get("/{team_id}", response_model=TeamResponse)
async def show_team(
    team_id: UUID,
    identity: IdentityId = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    return await TeamService(db).show_team(identity, team_id)


@router.put("/{team_id}")
async def update_team(
    team_id: UUID,
    body: TeamUpdate,
    identity: IdentityId = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    await TeamService(db).update_team(identity, team_id, body)
    return {"status": "ok"}


@router.delete("/{team_id}")
async def delete_team(
    team_id: UUID,
    identity: IdentityId = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    await TeamService(db).delete_team(identity, team_id)
    return {"status": "ok"}
