"""Role Model — capability table and role coercion.

Invariants:
    - has_capability is total over Role x Action
    - Any role value outside the Role enum raises InvalidRoleError (never allow/deny by default)
    - roles_with(action) is the only way services derive required roles

Design Decisions:
    - Explicit table over rank thresholds: Maintainer may create APIs but not
      manage Projects, which no single rank cut-off expresses
"""

from workbench.core.domain_types import Action, Role
from workbench.core.errors import InvalidRoleError


CAPABILITIES: dict[Role, frozenset[Action]] = {
    Role.OWNER: frozenset(Action),
    Role.MAINTAINER: frozenset({Action.READ, Action.CREATE_API}),
    Role.MEMBER: frozenset({Action.READ}),
}


def parse_role(value: object) -> Role:
    """Coerce a stored or submitted value into a Role."""
    if isinstance(value, Role):
        return value
    try:
        return Role(value)
    except ValueError:
        raise InvalidRoleError(value) from None


def has_capability(role: Role | str, action: Action | str) -> bool:
    return Action(action) in CAPABILITIES[parse_role(role)]


def roles_with(action: Action | str) -> frozenset[Role]:
    """Roles granted the given action."""
    action = Action(action)
    return frozenset(
        role for role, actions in CAPABILITIES.items() if action in actions
    )
