"""
Issue Tracker — users table

Usernames are unique by convention only; no constraint is declared.
The primary key is what makes a repeated insert_user with the same id fail.
"""

from __future__ import annotations

import uuid

from sqlalchemy import BOOLEAN, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tracker.models.base import Base


class UserRow(Base):
    """Row layout read by User.read and written by insert_user."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        comment="Immutable user identifier",
    )
    username: Mapped[str] = mapped_column(String, nullable=False)
    email_address: Mapped[str] = mapped_column(String, nullable=False)
    gravatar_email_address: Mapped[str] = mapped_column(
        String,
        nullable=False,
        comment="Presentation copy of the address used for the avatar lookup",
    )
    account_verified: Mapped[bool] = mapped_column(
        BOOLEAN,
        nullable=False,
        default=False,
        server_default="false",
    )
    password_hash: Mapped[str] = mapped_column(
        String, nullable=False, comment="Opaque, already hashed"
    )
    biography: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<UserRow id={self.id!r} username={self.username!r}>"
