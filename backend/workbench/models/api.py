"""API ORM — a request definition owned by exactly one Project.

Invariants:
    - project_id is non-nullable and never reassigned after creation
    - params/body/headers/authorization are opaque JSON objects
    - pre_request_script/post_response_script are stored, never executed
    - tags and versions keep caller order

Design Decisions:
    - JSON columns for payloads: stored as submitted
    - No membership table: access follows the owning project's memberships
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime, JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from workbench.db.base import Base


class Api(Base):
    """API entity — endpoint definition inside a project."""
    __tablename__ = "apis"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    project_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)
    endpoint: Mapped[str] = mapped_column(Text, nullable=False)
    method: Mapped[str] = mapped_column(String(10), nullable=False)
    params: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    body: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    headers: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    authorization: Mapped[dict] = mapped_column(
        JSON, nullable=False, default=dict,
    )
    pre_request_script: Mapped[str] = mapped_column(
        Text, nullable=False, default="",
    )
    post_response_script: Mapped[str] = mapped_column(
        Text, nullable=False, default="",
    )
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    versions: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    status: Mapped[str | None] = mapped_column(String(20), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    project: Mapped["Project"] = relationship(
        "Project", back_populates="apis", lazy="raise",
    )
