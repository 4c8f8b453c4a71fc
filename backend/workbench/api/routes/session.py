"""Session — returns the identity the request was authenticated as."""

from fastapi import APIRouter, Depends

from workbench.core.domain_types import IdentityId
from workbench.infrastructure.identity import get_current_identity

router = APIRouter(prefix="/api/v1/session", tags=["session"])


@router.get("")
async def get_session(identity: IdentityId = Depends(get_current_identity)):
    return {"identity": identity}
