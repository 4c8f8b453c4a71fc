"""Identity Provider — resolves the authenticated caller of a request.

Invariants:
    - Every resource route receives the caller identity as an explicit argument
    - Missing or blank identity header raises UnauthenticatedError (never a default user)

Design Decisions:
    - Identity is asserted by an upstream authenticating proxy via a trusted
      header; header name comes from settings
    - Provider object behind a FastAPI dependency: tests override the dependency
      or send the header directly
"""

import logging

from fastapi import Request

from workbench.config import get_settings
from workbench.core.domain_types import IdentityId
from workbench.core.errors import UnauthenticatedError
from workbench.core.repository_protocols import IdentityProvider

logger = logging.getLogger(__name__)


class HeaderIdentityProvider:
    """Reads the caller identity from a request header."""

    def __init__(self, header_name: str):
        self.header_name = header_name

    async def current_identity(self, request: Request) -> IdentityId:
        value = request.headers.get(self.header_name, "").strip()
        if not value:
            logger.info(
                f"Missing identity header {self.header_name}",
                extra={"path": request.url.path},
            )
            raise UnauthenticatedError()
        return IdentityId(value)


async def get_current_identity(request: Request) -> IdentityId:
    """FastAPI dependency for the authenticated caller."""
    provider: IdentityProvider = HeaderIdentityProvider(get_settings().identity_header)
    return await provider.current_identity(request)
