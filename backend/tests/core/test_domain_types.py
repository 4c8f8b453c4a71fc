"""Domain Types — verifies rich type definitions and enum values.

Tests:
    - NewType wrappers exist and are callable
    - Role ordering: OWNER > MAINTAINER > MEMBER
    - Closed enums reject unknown values
    - Scope constructors and labels
"""

from uuid import uuid4

import pytest

from workbench.core.domain_types import (
    ANY_ROLE, ApiMethod, ApiStatus, IdentityId, Membership, ProjectId,
    ProjectVisibility, Role, Scope, ScopeKind, TeamId,
)


def test_identity_types_wrap_values():
    uid = uuid4()
    assert TeamId(uid) == uid
    assert ProjectId(uid) == uid
    assert IdentityId("user-1") == "user-1"


def test_role_total_order():
    assert Role.OWNER.outranks(Role.MAINTAINER)
    assert Role.MAINTAINER.outranks(Role.MEMBER)
    assert Role.OWNER.outranks(Role.MEMBER)
    assert not Role.MEMBER.outranks(Role.MEMBER)
    assert sorted(Role, key=lambda r: r.rank) == [
        Role.MEMBER, Role.MAINTAINER, Role.OWNER,
    ]


def test_role_at_least():
    assert Role.at_least(Role.OWNER) == {Role.OWNER}
    assert Role.at_least(Role.MAINTAINER) == {Role.OWNER, Role.MAINTAINER}
    assert Role.at_least(Role.MEMBER) == ANY_ROLE


def test_role_values_match_stored_names():
    assert {r.value for r in Role} == {"Owner", "Maintainer", "Member"}


@pytest.mark.parametrize("enum_cls, bad", [
    (Role, "Admin"),
    (ProjectVisibility, "INTERNAL"),
    (ApiMethod, "TRACE"),
    (ApiStatus, "ARCHIVED"),
])
def test_closed_enums_reject_unknown_values(enum_cls, bad):
    with pytest.raises(ValueError):
        enum_cls(bad)


def test_scope_constructors_and_label():
    tid, pid = uuid4(), uuid4()
    assert Scope.team(tid) == Scope(ScopeKind.TEAM, tid)
    assert Scope.project(pid).kind == ScopeKind.PROJECT
    assert Scope.team(tid).label == "Team"
    assert Scope.project(pid).label == "Project"


def test_membership_is_hashable_value():
    scope = Scope.project(uuid4())
    a = Membership(IdentityId("u1"), scope, Role.OWNER)
    b = Membership(IdentityId("u1"), scope, Role.OWNER)
    assert a == b
    assert len({a, b}) == 1
