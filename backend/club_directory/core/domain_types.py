"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ClubId wraps the opaque string id stored in the database
    - Permission tags are encoded as a str Enum, never matched as raw strings
    - Club field bounds live here and nowhere else

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ClubId = NewType("ClubId", str)


# ─── Enums ───────────────────────────────────────────────────────

class Permission(str, Enum):
    """Permission tags carried by identities. Only ADMIN gates mutations."""
    ADMIN = "ADMIN"


class Procedure(str, Enum):
    """Remote procedures exposed by the club service."""
    CREATE_CLUB = "createClub"
    UPDATE_CLUB = "updateClub"
    DELETE_CLUB = "deleteClub"
    GET_CLUB = "getClub"
    GET_ALL_CLUBS = "getAllClubs"


# ─── Club Field Bounds ───────────────────────────────────────────

@dataclass(frozen=True)
class FieldBounds:
    """Inclusive length bounds for a text field."""
    min_length: int
    max_length: int

    def contains(self, value: str) -> bool:
        return self.min_length <= len(value) <= self.max_length


CLUB_FIELD_BOUNDS: dict[str, FieldBounds] = {
    "name": FieldBounds(1, 50),
    "description": FieldBounds(1, 100),
    "linktree": FieldBounds(1, 100),
}

DEFAULT_CLUB_IMAGE = "/images/default-club-image.png"
DEFAULT_CLUB_LINKTREE = ""
