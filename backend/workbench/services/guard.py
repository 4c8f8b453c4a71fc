"""Authorization Guard — the single policy check in front of every scoped operation.

Invariants:
    - authorize(i, s, R) succeeds iff a membership (i, s, r) exists with r in R
    - Missing scope and insufficient role raise the same NotFoundOrDeniedError
    - Every decision is a fresh membership lookup

Design Decisions:
    - Guard owns the lookup and the raise; the decision itself lives in
      core/enforce_access.decide (pure)
    - require() derives required roles from the capability table so no
      service hardcodes a role set
"""

import logging
from collections.abc import Iterable

from workbench.core.capabilities import roles_with
from workbench.core.domain_types import Action, IdentityId, Membership, Role, Scope
from workbench.core.enforce_access import AccessDecision, decide
from workbench.core.errors import ErrorContext, NotFoundOrDeniedError
from workbench.core.repository_protocols import MembershipRepository

logger = logging.getLogger(__name__)


class AuthorizationGuard:
    """Approves or denies (identity, scope, required roles)."""

    def __init__(self, memberships: MembershipRepository):
        self.memberships = memberships

    async def check(
        self, identity: IdentityId, scope: Scope, required_roles: Iterable[Role],
    ) -> AccessDecision:
        membership = await self.memberships.find_membership(identity, scope)
        return decide(
            membership.role if membership else None, frozenset(required_roles),
        )

    async def authorize(
        self, identity: IdentityId, scope: Scope, required_roles: Iterable[Role],
    ) -> Membership:
        """Return the caller's membership or raise NotFoundOrDeniedError."""
        decision = await self.check(identity, scope, required_roles)
        log_extra = {
            "identity": identity,
            "scope_type": scope.kind.value,
            "scope_id": str(scope.id),
        }
        if not decision.allowed:
            logger.info(f"Access denied: {decision.reason}", extra=log_extra)
            raise NotFoundOrDeniedError(
                scope.label, str(scope.id),
                ErrorContext(
                    identity=identity,
                    scope_type=scope.kind.value,
                    scope_id=str(scope.id),
                ),
            )
        logger.debug(f"Access allowed: {decision.reason}", extra=log_extra)
        return Membership(identity, scope, decision.role)

    async def require(
        self, identity: IdentityId, scope: Scope, action: Action,
    ) -> Membership:
        """authorize() with the roles granted action."""
        return await self.authorize(identity, scope, roles_with(action))
