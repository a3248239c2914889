"""Club Rules — pure validation and payload shaping for club mutations.

Invariants:
    - name and description are required; linktree is optional
    - Every provided field must satisfy CLUB_FIELD_BOUNDS
    - An empty linktree or image counts as not provided
    - Payload builders never emit an id in an update patch

Design Decisions:
    - check_* functions return an error dict or None (never raise):
      callers decide how to surface the failure
"""

from typing import Any, Mapping

from club_directory.core.domain_types import CLUB_FIELD_BOUNDS

REQUIRED_FIELDS = ("name", "description")
OPTIONAL_FIELDS = ("linktree",)


def provided(value: Any) -> bool:
    """True when a caller actually supplied a non-empty value."""
    return value is not None and value != ""


def _error(field: str, message: str) -> dict:
    return {"error_code": "INVALID_CLUB", "field": field, "message": message}


def _check_bounds(field: str, value: Any) -> dict | None:
    if not isinstance(value, str):
        return _error(field, f"{field} must be a string")
    bounds = CLUB_FIELD_BOUNDS[field]
    if not bounds.contains(value):
        return _error(
            field,
            f"{field} length must be between {bounds.min_length} "
            f"and {bounds.max_length} (got {len(value)})",
        )
    return None


def check_club_fields(club: Mapping[str, Any] | None) -> dict | None:
    """Validate presence and length of club fields."""
    if not club:
        return _error("club", "club data is required")
    for field in REQUIRED_FIELDS:
        value = club.get(field)
        if not provided(value):
            return _error(field, f"{field} is required")
        error = _check_bounds(field, value)
        if error:
            return error
    for field in OPTIONAL_FIELDS:
        value = club.get(field)
        if provided(value):
            error = _check_bounds(field, value)
            if error:
                return error
    return None


def check_club_id(club_id: Any) -> dict | None:
    if not provided(club_id) or not isinstance(club_id, str):
        return _error("id", "club id is required")
    return None


def is_valid_club_data(club: Mapping[str, Any] | None) -> bool:
    """Client-side pre-check mirroring the server validation gate."""
    return check_club_fields(club) is None


def build_club_payload(
    club: Mapping[str, Any], default_image: str, default_linktree: str,
) -> dict:
    """Build a create payload with defaults applied (id assigned by caller)."""
    return {
        "name": club["name"],
        "description": club["description"],
        "linktree": club.get("linktree") if provided(club.get("linktree")) else default_linktree,
        "image": club.get("image") if provided(club.get("image")) else default_image,
    }


def build_club_patch(club: Mapping[str, Any], default_image: str) -> dict:
    """Build an update patch. Omitted image resets to the default; omitted linktree is left alone."""
    patch = {
        "name": club["name"],
        "description": club["description"],
        "image": club.get("image") if provided(club.get("image")) else default_image,
    }
    if provided(club.get("linktree")):
        patch["linktree"] = club["linktree"]
    return patch
