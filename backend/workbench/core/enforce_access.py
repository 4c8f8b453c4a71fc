"""Access Enforcement — pure authorization decision over a looked-up membership.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - decide() allows iff a membership exists AND its role is in required_roles
    - An empty required_roles set denies everything
    - A stored role outside the Role enum raises InvalidRoleError (never silently denied)

Design Decisions:
    - Decision returned as a value, raising left to the guard: keeps the
      lookup/raise shell thin and the policy testable without a store
"""

from dataclasses import dataclass

from workbench.core.capabilities import parse_role
from workbench.core.domain_types import Role


@dataclass(frozen=True)
class AccessDecision:
    """Outcome of an authorization check."""
    allowed: bool
    role: Role | None
    reason: str


def decide(
    member_role: Role | str | None, required_roles: frozenset[Role],
) -> AccessDecision:
    """Decide access from the caller's role in a scope (None = not a member)."""
    if member_role is None:
        return AccessDecision(False, None, "not a member of scope")
    role = parse_role(member_role)
    if role not in required_roles:
        return AccessDecision(
            False, role,
            f"role {role.value} not in {sorted(r.value for r in required_roles)}",
        )
    return AccessDecision(True, role, f"granted by role {role.value}")
