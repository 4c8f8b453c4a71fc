"""Resource Hierarchy — Team -> Project -> API ownership and membership predicates.

Invariants:
    - A team is visible through its team memberships only
    - A project is visible through its project memberships only (team membership
      does not cascade down)
    - An API is visible through the memberships of its owning project; a role
      change on the project applies to its APIs at the next statement
    - parent_scope is fixed at creation: no re-parenting

Design Decisions:
    - Predicates are uncorrelated IN subqueries: usable unchanged in SELECT,
      UPDATE and DELETE statements
"""

from sqlalchemy import ColumnElement

from workbench.core.domain_types import ANY_ROLE, IdentityId, Role, Scope, ScopeKind
from workbench.models.api import Api
from workbench.models.project import Project
from workbench.models.team import Team
from workbench.services.membership_store import MembershipStore


def team_clause(
    identity: IdentityId, roles: frozenset[Role] = ANY_ROLE,
) -> ColumnElement[bool]:
    """Teams where identity holds one of roles."""
    return Team.id.in_(
        MembershipStore.scope_ids_for(identity, ScopeKind.TEAM, roles),
    )


def project_clause(
    identity: IdentityId, roles: frozenset[Role] = ANY_ROLE,
) -> ColumnElement[bool]:
    """Projects where identity holds one of roles."""
    return Project.id.in_(
        MembershipStore.scope_ids_for(identity, ScopeKind.PROJECT, roles),
    )


def api_clause(
    identity: IdentityId, roles: frozenset[Role] = ANY_ROLE,
) -> ColumnElement[bool]:
    """APIs whose owning project grants identity one of roles."""
    return Api.project_id.in_(
        MembershipStore.scope_ids_for(identity, ScopeKind.PROJECT, roles),
    )


def parent_scope(entity: Project | Api) -> Scope:
    """Scope that governs access to entity."""
    if isinstance(entity, Project):
        return Scope.team(entity.team_id)
    if isinstance(entity, Api):
        return Scope.project(entity.project_id)
    raise TypeError(f"{type(entity).__name__} has no parent scope")
