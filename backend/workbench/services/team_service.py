"""Team Service — teamList, teamCreate, teamShow, teamUpdate, teamDelete.

Invariants:
    - teamCreate inserts the team and the creator's Owner membership in one transaction
    - List/show only return teams the caller is a member of
    - Update/delete require Owner; the statement itself re-checks ownership
"""

import logging
from collections.abc import Mapping
from typing import Any
from uuid import UUID

from sqlalchemy import delete, select, update

from workbench.core.domain_types import Action, IdentityId, Role, Scope
from workbench.core.capabilities import roles_with
from workbench.core.errors import NotFoundOrDeniedError
from workbench.models.team import Team
from workbench.schemas.team import TeamCreate, TeamUpdate
from workbench.schemas.validate import decode
from workbench.services.hierarchy import team_clause
from workbench.services.resource_service import ResourceService

logger = logging.getLogger(__name__)


class TeamService(ResourceService):
    """Membership-scoped team CRUD."""

    async def list_teams(self, identity: IdentityId) -> list[Team]:
        return await self._fetch_all(
            select(Team)
            .where(team_clause(identity))
            .order_by(Team.created_at)
        )

    async def create_team(
        self, identity: IdentityId, payload: TeamCreate | Mapping[str, Any],
    ) -> Team:
        body = decode(TeamCreate, payload)
        async with self._atomic():
            team = Team(name=body.name, description=body.description)
            self.db.add(team)
            await self.db.flush()
            await self.memberships.create_membership(
                identity, Scope.team(team.id), Role.OWNER,
            )
        logger.info(f"Team {team.id} created", extra={"identity": identity})
        return team

    async def show_team(self, identity: IdentityId, team_id: UUID) -> Team:
        await self.guard.require(identity, Scope.team(team_id), Action.READ)
        team = await self._fetch_one(
            select(Team).where(Team.id == team_id).where(team_clause(identity))
        )
        if team is None:
            raise NotFoundOrDeniedError("Team", str(team_id))
        return team

    async def update_team(
        self, identity: IdentityId, team_id: UUID,
        payload: TeamUpdate | Mapping[str, Any],
    ) -> bool:
        body = decode(TeamUpdate, payload)
        await self.guard.require(identity, Scope.team(team_id), Action.UPDATE_TEAM)
        async with self._atomic():
            result = await self.db.execute(
                update(Team)
                .where(Team.id == team_id)
                .where(team_clause(identity, roles_with(Action.UPDATE_TEAM)))
                .values(name=body.name, description=body.description)
                .execution_options(synchronize_session=False)
            )
            self._expect_rows(result, "Team", team_id)
        logger.info(f"Team {team_id} updated", extra={"identity": identity})
        return True

    async def delete_team(self, identity: IdentityId, team_id: UUID) -> bool:
        await self.guard.require(identity, Scope.team(team_id), Action.DELETE_TEAM)
        async with self._atomic():
            result = await self.db.execute(
                delete(Team)
                .where(Team.id == team_id)
                .where(team_clause(identity, roles_with(Action.DELETE_TEAM)))
                .execution_options(synchronize_session=False)
            )
            self._expect_rows(result, "Team", team_id)
        logger.info(f"Team {team_id} deleted", extra={"identity": identity})
        return True
