"""Membership Store — source of truth for who belongs to which team/project, with what role.

Invariants:
    - At most one membership per (identity, scope); a second create raises DuplicateMembershipError
    - Stored roles are parsed on every read: a corrupt role raises InvalidRoleError
    - No caching — every lookup is a fresh store query
    - create_membership flushes but never commits: it joins the caller's transaction

Design Decisions:
    - Explicit scope-kind -> (model, column) table: every mapping visible in one place
    - scope_ids_for returns a SELECT, not rows: resource statements embed it as
      an IN subquery so the membership check runs inside the same statement
"""

import logging

from sqlalchemy import Select, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from workbench.core.capabilities import parse_role
from workbench.core.domain_types import (
    ANY_ROLE, IdentityId, Membership, Role, Scope, ScopeKind,
)
from workbench.core.errors import DuplicateMembershipError
from workbench.models.membership import ProjectMember, TeamMember

logger = logging.getLogger(__name__)

_MEMBER_TABLES = {
    ScopeKind.TEAM: (TeamMember, TeamMember.team_id),
    ScopeKind.PROJECT: (ProjectMember, ProjectMember.project_id),
}


class MembershipStore:
    """Membership lookups and creation for teams and projects."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_membership(
        self, identity: IdentityId, scope: Scope,
    ) -> Membership | None:
        model, scope_column = _MEMBER_TABLES[scope.kind]
        result = await self.db.execute(
            select(model.role)
            .where(scope_column == scope.id)
            .where(model.user_id == identity)
        )
        role = result.scalar_one_or_none()
        if role is None:
            return None
        return Membership(identity, scope, parse_role(role))

    async def is_member(self, identity: IdentityId, scope: Scope) -> bool:
        return await self.find_membership(identity, scope) is not None

    async def has_role(
        self, identity: IdentityId, scope: Scope, allowed_roles: frozenset[Role],
    ) -> bool:
        membership = await self.find_membership(identity, scope)
        return membership is not None and membership.role in allowed_roles

    async def create_membership(
        self, identity: IdentityId, scope: Scope, role: Role | str,
    ) -> Membership:
        """Insert a membership row in the current transaction."""
        role = parse_role(role)
        if await self.find_membership(identity, scope) is not None:
            raise DuplicateMembershipError(
                identity, scope.kind.value, str(scope.id),
            )
        model, scope_column = _MEMBER_TABLES[scope.kind]
        self.db.add(model(
            user_id=identity, role=role.value, **{scope_column.key: scope.id},
        ))
        try:
            await self.db.flush()
        except IntegrityError as e:
            # concurrent insert won the unique constraint; caller rolls back
            raise DuplicateMembershipError(
                identity, scope.kind.value, str(scope.id),
            ) from e
        logger.info(
            f"Membership created: {role.value}",
            extra={
                "identity": identity,
                "scope_type": scope.kind.value,
                "scope_id": str(scope.id),
            },
        )
        return Membership(identity, scope, role)

    @staticmethod
    def scope_ids_for(
        identity: IdentityId, kind: ScopeKind,
        roles: frozenset[Role] = ANY_ROLE,
    ) -> Select:
        """SELECT of scope ids where identity holds one of roles."""
        model, scope_column = _MEMBER_TABLES[kind]
        query = select(scope_column).where(model.user_id == identity)
        if roles != ANY_ROLE:
            query = query.where(model.role.in_([r.value for r in roles]))
        return query
