"""Permission Enforcement — pure checks over a resolved identity's permission set.

Invariants:
    - An identity holds a permission only if the tag appears in its permissions list
    - Missing or malformed permissions never grant access
"""

from typing import Any, Iterable, Mapping

from club_directory.core.domain_types import Permission


def permission_set(identity: Mapping[str, Any] | None) -> frozenset[str]:
    if not identity:
        return frozenset()
    raw = identity.get("permissions")
    if not isinstance(raw, (list, tuple, set, frozenset)):
        return frozenset()
    return frozenset(p for p in raw if isinstance(p, str))


def has_permissions(
    identity: Mapping[str, Any] | None, required: Iterable[Permission],
) -> bool:
    """True when the identity holds every required permission."""
    held = permission_set(identity)
    return all(p.value in held for p in required)


def is_admin(identity: Mapping[str, Any] | None) -> bool:
    return has_permissions(identity, [Permission.ADMIN])
