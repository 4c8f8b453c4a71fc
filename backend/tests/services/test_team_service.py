"""Team Service — create with owner membership, scoped reads, owner-only writes."""

from uuid import uuid4

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import InvalidRequestError

from workbench.core.domain_types import IdentityId, Role, Scope
from workbench.core.errors import (
    InputValidationError, NotFoundOrDeniedError, StoreError,
)
from workbench.models.membership import TeamMember
from workbench.models.project import Project
from workbench.models.team import Team
from workbench.services.membership_store import MembershipStore
from workbench.services.team_service import TeamService

OWNER = IdentityId("user-owner")
OTHER = IdentityId("user-other")


async def _count(db, model) -> int:
    result = await db.execute(select(func.count()).select_from(model))
    return result.scalar_one()


async def test_create_team_inserts_owner_membership(test_db):
    team = await TeamService(test_db).create_team(OWNER, {"name": "Platform"})
    membership = await MembershipStore(test_db).find_membership(
        OWNER, Scope.team(team.id),
    )
    assert membership.role is Role.OWNER
    assert await _count(test_db, TeamMember) == 1


async def test_create_team_rejects_short_name(test_db):
    with pytest.raises(InputValidationError) as exc_info:
        await TeamService(test_db).create_team(OWNER, {"name": "ab"})
    assert exc_info.value.field == "name"
    assert await _count(test_db, Team) == 0


async def test_failed_membership_insert_leaves_no_team(test_db, monkeypatch):
    async def _fail(self, identity, scope, role):
        raise StoreError("simulated failure", "commit")

    monkeypatch.setattr(MembershipStore, "create_membership", _fail)
    with pytest.raises(StoreError):
        await TeamService(test_db).create_team(OWNER, {"name": "Doomed"})
    monkeypatch.undo()

    assert await _count(test_db, Team) == 0
    assert await _count(test_db, TeamMember) == 0


async def test_list_teams_only_returns_memberships(test_db, seed_team):
    service = TeamService(test_db)
    await service.create_team(OTHER, {"name": "Other Team"})

    owner_teams = await service.list_teams(OWNER)
    other_teams = await service.list_teams(OTHER)
    assert [t.id for t in owner_teams] == [seed_team.id]
    assert [t.name for t in other_teams] == ["Other Team"]
    assert await service.list_teams(IdentityId("nobody")) == []


async def test_show_team_for_member(test_db, seed_team, add_member):
    await add_member(OTHER, Scope.team(seed_team.id), Role.MEMBER)
    team = await TeamService(test_db).show_team(OTHER, seed_team.id)
    assert team.name == "Core Team"


async def test_show_team_hides_existence(test_db, seed_team):
    service = TeamService(test_db)
    with pytest.raises(NotFoundOrDeniedError) as denied:
        await service.show_team(OTHER, seed_team.id)
    with pytest.raises(NotFoundOrDeniedError) as missing:
        await service.show_team(OTHER, uuid4())
    assert str(denied.value) == str(missing.value) == "Team not found"


async def test_owner_updates_team(test_db, seed_team):
    service = TeamService(test_db)
    assert await service.update_team(
        OWNER, seed_team.id, {"name": "Renamed", "description": "new"},
    ) is True
    team = await service.show_team(OWNER, seed_team.id)
    assert team.name == "Renamed"
    assert team.description == "new"


@pytest.mark.parametrize("role", [Role.MAINTAINER, Role.MEMBER])
async def test_non_owner_cannot_update_team(test_db, seed_team, add_member, role):
    await add_member(OTHER, Scope.team(seed_team.id), role)
    service = TeamService(test_db)
    with pytest.raises(NotFoundOrDeniedError):
        await service.update_team(OTHER, seed_team.id, {"name": "Hijacked"})
    team = await service.show_team(OWNER, seed_team.id)
    assert team.name == "Core Team"


@pytest.mark.parametrize("role", [Role.MAINTAINER, Role.MEMBER])
async def test_non_owner_cannot_delete_team(test_db, seed_team, add_member, role):
    await add_member(OTHER, Scope.team(seed_team.id), role)
    with pytest.raises(NotFoundOrDeniedError):
        await TeamService(test_db).delete_team(OTHER, seed_team.id)
    assert await _count(test_db, Team) == 1


async def test_delete_team_cascades_to_projects(test_db, seed_team, seed_project):
    assert await TeamService(test_db).delete_team(OWNER, seed_team.id) is True
    assert await _count(test_db, Team) == 0
    assert await _count(test_db, Project) == 0
    assert await _count(test_db, TeamMember) == 0
    assert await TeamService(test_db).list_teams(OWNER) == []


async def test_child_collections_are_never_lazy_loaded(seed_team):
    # projects and members are read through filtered queries only
    with pytest.raises(InvalidRequestError):
        seed_team.projects
