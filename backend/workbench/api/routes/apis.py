"""API Routes — apiList, apiCreate over HTTP."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from workbench.core.domain_types import IdentityId
from workbench.infrastructure.database import get_db
from workbench.infrastructure.identity import get_current_identity
from workbench.schemas.api import ApiCreate, ApiFilter, ApiResponse
from workbench.services.api_service import ApiService

router = APIRouter(prefix="/api/v1/apis", tags=["apis"])


@router.get("", response_model=list[ApiResponse])
async def list_apis(
    project_id: UUID,
    name: str | None = Query(None),
    identity: IdentityId = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    filters = ApiFilter(project_id=project_id, name=name)
    return await ApiService(db).list_apis(identity, filters)


@router.post(
    "", response_model=ApiResponse, status_code=status.HTTP_201_CREATED,
)
async def create_api(
    body: ApiCreate,
    identity: IdentityId = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    return await ApiService(db).create_api(identity, body)
