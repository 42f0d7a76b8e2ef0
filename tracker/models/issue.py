"""
Issue Tracker — issues table

author_id and assigned_user_id point at users.id but carry no foreign key:
the data layer does not check the reference. priority holds the integer
code of tracker.config.Priority (0-4).
"""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import BOOLEAN, INTEGER, TIMESTAMP, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tracker.models.base import Base


class IssueRow(Base):
    """Row layout read by Issue.read and written by insert_issue."""

    __tablename__ = "issues"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        comment="Immutable issue identifier",
    )
    title: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    author_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, nullable=False, index=True, comment="users.id of the reporter"
    )
    assigned_user_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, nullable=True, comment="users.id of the assignee, if any"
    )
    priority: Mapped[int] = mapped_column(
        INTEGER,
        nullable=False,
        default=0,
        server_default="0",
        comment="Priority code: 0=not assigned, 1=low, 2=medium, 3=high, 4=urgent",
    )
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), nullable=False
    )
    is_closed: Mapped[bool] = mapped_column(
        BOOLEAN,
        nullable=False,
        default=False,
        server_default="false",
    )

    __table_args__ = (
        Index("ix_issues_created_at", "created_at"),
        Index("ix_issues_updated_at", "updated_at"),
        Index("ix_issues_priority", "priority"),
    )

    def __repr__(self) -> str:
        return (
            f"<IssueRow id={self.id!r} title={self.title!r} "
            f"priority={self.priority!r} closed={self.is_closed!r}>"
        )
