"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - IdentityId is an opaque string supplied by the identity provider
    - TeamId, ProjectId, ApiId wrap UUIDs
    - Role, ScopeKind, ProjectVisibility, ApiMethod, ApiStatus are closed
      enumerations — unknown values are rejected, never clamped
    - Role is totally ordered: OWNER > MAINTAINER > MEMBER

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: stored as their value in String columns and serialized to JSON as-is
    - Scope is a frozen dataclass: hashable, usable as a dict key in tests and logs
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

IdentityId = NewType("IdentityId", str)
TeamId = NewType("TeamId", UUID)
ProjectId = NewType("ProjectId", UUID)
ApiId = NewType("ApiId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class Role(str, Enum):
    """Membership roles, ordered by privilege via rank."""
    OWNER = "Owner"
    MAINTAINER = "Maintainer"
    MEMBER = "Member"

    @property
    def rank(self) -> int:
        return _ROLE_RANK[self]

    def outranks(self, other: "Role") -> bool:
        return self.rank > other.rank

    @classmethod
    def at_least(cls, minimum: "Role") -> frozenset["Role"]:
        """All roles with privilege >= minimum."""
        return frozenset(r for r in cls if r.rank >= minimum.rank)


_ROLE_RANK = {
    Role.OWNER: 3,
    Role.MAINTAINER: 2,
    Role.MEMBER: 1,
}

ANY_ROLE: frozenset[Role] = frozenset(Role)


class Action(str, Enum):
    """Capabilities a role may hold."""
    READ = "read"
    CREATE_PROJECT = "create_project"
    UPDATE_PROJECT = "update_project"
    DELETE_PROJECT = "delete_project"
    UPDATE_TEAM = "update_team"
    DELETE_TEAM = "delete_team"
    CREATE_API = "create_api"


class ScopeKind(str, Enum):
    """The resource kinds memberships attach to."""
    TEAM = "team"
    PROJECT = "project"


class ProjectVisibility(str, Enum):
    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"


class ApiMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class ApiStatus(str, Enum):
    DRAFT = "DRAFT"
    DEVELOPING = "DEVELOPING"
    TESTING = "TESTING"
    PUBLISHED = "PUBLISHED"
    DEPRECATED = "DEPRECATED"


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class Scope:
    """A Team or Project — the unit memberships attach to."""
    kind: ScopeKind
    id: UUID

    @classmethod
    def team(cls, team_id: UUID) -> "Scope":
        return cls(ScopeKind.TEAM, team_id)

    @classmethod
    def project(cls, project_id: UUID) -> "Scope":
        return cls(ScopeKind.PROJECT, project_id)

    @property
    def label(self) -> str:
        """Human-facing resource name, e.g. 'Project'."""
        return self.kind.value.capitalize()


@dataclass(frozen=True)
class Membership:
    """Authorization record: one role per identity per scope."""
    identity: IdentityId
    scope: Scope
    role: Role
