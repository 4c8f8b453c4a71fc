"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Team owns Projects; Project owns APIs; memberships attach to Team or Project

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from workbench.models.team import Team  # noqa: F401
from workbench.models.project import Project  # noqa: F401
from workbench.models.api import Api  # noqa: F401
from workbench.models.membership import TeamMember, ProjectMember  # noqa: F401
