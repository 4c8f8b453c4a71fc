"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Membership lookups and identity resolution accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Async in Protocol: implementations do IO; pure core functions
      (enforce_access, capabilities) never await
"""

from typing import Any, Protocol

from workbench.core.domain_types import IdentityId, Membership, Role, Scope


class MembershipRepository(Protocol):
    """Contract for membership persistence — implemented by MembershipStore."""
    async def find_membership(
        self, identity: IdentityId, scope: Scope,
    ) -> Membership | None: ...
    async def is_member(self, identity: IdentityId, scope: Scope) -> bool: ...
    async def has_role(
        self, identity: IdentityId, scope: Scope, allowed_roles: frozenset[Role],
    ) -> bool: ...
    async def create_membership(
        self, identity: IdentityId, scope: Scope, role: Role,
    ) -> Membership: ...


class IdentityProvider(Protocol):
    """Contract for resolving the caller of a request."""
    async def current_identity(self, request: Any) -> IdentityId: ...
