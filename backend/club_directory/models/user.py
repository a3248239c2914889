"""User ORM — identities issued by the external identity provider.

Invariants:
    - password and secret are sensitive: repositories exclude them by default
    - secret is unique; it is the bearer credential resolved by the authorization gate
    - permissions and roles are JSON lists of string tags

Design Decisions:
    - The club service only reads this table; rows are written by the identity provider
"""

import uuid

from sqlalchemy import String, Text, JSON
from sqlalchemy.orm import Mapped, mapped_column

from club_directory.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    email: Mapped[str | None] = mapped_column(
        String(320), unique=True, nullable=True,
    )
    image: Mapped[str | None] = mapped_column(Text, nullable=True)
    password: Mapped[str | None] = mapped_column(Text, nullable=True)
    secret: Mapped[str | None] = mapped_column(
        String(255), unique=True, nullable=True,
    )
    permissions: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    roles: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
