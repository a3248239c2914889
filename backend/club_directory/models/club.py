"""Club ORM — a publishable directory entry.

Invariants:
    - id is an opaque UUID4 string, assigned once and never patched
    - name <= 50 chars, description <= 100, linktree <= 100 (enforced upstream
      by the club service, column sizes mirror the bounds)
    - image and linktree always hold a value (defaults applied before insert)
"""

import uuid

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from club_directory.core.domain_types import DEFAULT_CLUB_IMAGE, DEFAULT_CLUB_LINKTREE
from club_directory.db.base import Base


class Club(Base):
    __tablename__ = "clubs"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(String(100), nullable=False)
    linktree: Mapped[str] = mapped_column(
        String(100), nullable=False, default=DEFAULT_CLUB_LINKTREE,
    )
    image: Mapped[str] = mapped_column(
        String(500), nullable=False, default=DEFAULT_CLUB_IMAGE,
    )
