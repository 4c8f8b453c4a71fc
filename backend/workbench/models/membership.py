"""Membership ORM — (identity, scope, role) rows for teams and projects.

Invariants:
    - Exactly one row per (user_id, team_id) and per (user_id, project_id)
    - role holds a Role value ("Owner" | "Maintainer" | "Member")
    - Rows are deleted with their team/project

Design Decisions:
    - One table per scope kind: each scope keeps a real foreign key
    - user_id is an opaque string: identities come from the external provider,
      there is no users table here
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from workbench.db.base import Base


class TeamMember(Base):
    """Team membership row."""
    __tablename__ = "team_members"
    __table_args__ = (
        UniqueConstraint("user_id", "team_id", name="uq_team_members_user_team"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    team_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("teams.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    user_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    role: Mapped[str] = mapped_column(String(20), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    team: Mapped["Team"] = relationship(
        "Team", back_populates="members", lazy="raise",
    )


class ProjectMember(Base):
    """Project membership row."""
    __tablename__ = "project_members"
    __table_args__ = (
        UniqueConstraint(
            "user_id", "project_id", name="uq_project_members_user_project",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    project_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    user_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    role: Mapped[str] = mapped_column(String(20), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    project: Mapped["Project"] = relationship(
        "Project", back_populates="members", lazy="raise",
    )
