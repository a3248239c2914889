"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Every repository method returns a StoreResult and never raises
    - Rows cross the boundary as plain dicts, already projected

Design Decisions:
    - Protocol over ABC: structural subtyping, in-memory fakes need no inheritance
    - One generic CRUD contract plus per-entity contracts layered on top
"""

from typing import Any, Mapping, Protocol, Sequence, runtime_checkable

from club_directory.core.domain_types import ClubId
from club_directory.core.store_result import StoreResult

Row = dict[str, Any]
Query = Mapping[str, Any]


@runtime_checkable
class Repository(Protocol):
    """Generic CRUD contract, one implementation per entity."""
    async def find_many(
        self, query: Query | None = None, fields: Sequence[str] | None = None,
    ) -> StoreResult[list[Row]]: ...
    async def find_one(
        self, query: Query, fields: Sequence[str] | None = None,
    ) -> StoreResult[Row]: ...
    async def create(
        self, payload: Query, fields: Sequence[str] | None = None,
    ) -> StoreResult[Row]: ...
    async def update(
        self, locator: Query, patch: Query, fields: Sequence[str] | None = None,
    ) -> StoreResult[Row]: ...
    async def delete(
        self, locator: Query, fields: Sequence[str] | None = None,
    ) -> StoreResult[Row]: ...


class ClubStore(Protocol):
    """Club persistence consumed by the club service."""
    async def get_all_clubs(self) -> StoreResult[list[Row]]: ...
    async def get_club_by_id(self, club_id: ClubId) -> StoreResult[Row]: ...
    async def create_club(self, club: Query) -> StoreResult[Row]: ...
    async def update_club_by_id(
        self, club_id: ClubId, patch: Query,
    ) -> StoreResult[Row]: ...
    async def delete_club_by_id(self, club_id: ClubId) -> StoreResult[Row]: ...


class IdentityStore(Protocol):
    """Read-only identity lookups consumed by the authorization gate."""
    async def get_user_by_secret(self, secret: str) -> StoreResult[Row]: ...
