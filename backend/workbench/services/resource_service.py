"""Resource Service Base — shared wiring and transaction handling for team/project/api services.

Invariants:
    - Each service owns one AsyncSession for the duration of a request
    - _atomic() commits on success and rolls back on ANY exception, then re-raises
    - Reads refresh identity-mapped rows: bulk UPDATEs skip session synchronization
    - _expect_rows() turns a zero-row filtered write into NotFoundOrDeniedError

Design Decisions:
    - Services commit themselves: a create (entity + owner membership) is one
      transaction the route never has to assemble
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import Select
from sqlalchemy.engine import CursorResult
from sqlalchemy.ext.asyncio import AsyncSession

from workbench.core.errors import NotFoundOrDeniedError
from workbench.services.guard import AuthorizationGuard
from workbench.services.membership_store import MembershipStore


class ResourceService:
    """Base for per-resource services."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.memberships = MembershipStore(db)
        self.guard = AuthorizationGuard(self.memberships)

    @asynccontextmanager
    async def _atomic(self) -> AsyncGenerator[AsyncSession, None]:
        try:
            yield self.db
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

    async def _fetch_all(self, query: Select) -> list:
        """Run a read, refreshing rows already in the identity map."""
        result = await self.db.execute(
            query.execution_options(populate_existing=True),
        )
        return list(result.scalars().all())

    async def _fetch_one(self, query: Select):
        result = await self.db.execute(
            query.execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    @staticmethod
    def _expect_rows(
        result: CursorResult, resource_type: str, resource_id: object,
    ) -> None:
        if result.rowcount == 0:
            raise NotFoundOrDeniedError(resource_type, str(resource_id))
