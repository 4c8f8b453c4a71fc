"""Team ORM — top of the ownership hierarchy.

Invariants:
    - id is UUID primary key
    - name is 3-50 chars (enforced at the schema boundary)
    - Deleting a team cascades to its projects and team memberships

Design Decisions:
    - Cascades declared on the foreign keys (ondelete=CASCADE) with
      passive_deletes: membership-filtered bulk DELETE statements bypass the
      ORM unit of work, so the database does the cascading
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from workbench.db.base import Base


class Team(Base):
    """Team aggregate — owns projects and team memberships."""
    __tablename__ = "teams"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    projects: Mapped[list["Project"]] = relationship(
        "Project", back_populates="team",
        cascade="all, delete-orphan", passive_deletes=True, lazy="raise",
    )
    members: Mapped[list["TeamMember"]] = relationship(
        "TeamMember", back_populates="team",
        cascade="all, delete-orphan", passive_deletes=True, lazy="raise",
    )
