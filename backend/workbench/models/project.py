"""Project ORM — owned by exactly one Team, owns APIs.

Invariants:
    - team_id is non-nullable and never reassigned after creation
    - visibility is a ProjectVisibility value ("PUBLIC" | "PRIVATE")
    - Project memberships are independent of the owning team's memberships

Design Decisions:
    - visibility stored as String: enum checked at the schema boundary
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from workbench.db.base import Base


class Project(Base):
    """Project entity — scope for project memberships and APIs."""
    __tablename__ = "projects"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    team_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("teams.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(String(255), nullable=False)
    visibility: Mapped[str] = mapped_column(
        String(10), nullable=False, default="PRIVATE",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    team: Mapped["Team"] = relationship(
        "Team", back_populates="projects", lazy="raise",
    )
    apis: Mapped[list["Api"]] = relationship(
        "Api", back_populates="project",
        cascade="all, delete-orphan", passive_deletes=True, lazy="raise",
    )
    members: Mapped[list["ProjectMember"]] = relationship(
        "ProjectMember", back_populates="project",
        cascade="all, delete-orphan", passive_deletes=True, lazy="raise",
    )
