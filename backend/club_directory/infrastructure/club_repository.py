"""Club Repository — club-specific lookups layered on the generic primitives."""

from club_directory.core.domain_types import ClubId
from club_directory.core.repository_protocols import Query, Row
from club_directory.core.store_result import StoreResult
from club_directory.infrastructure.repository import SqlRepository
from club_directory.models.club import Club


class ClubRepository(SqlRepository):
    model = Club

    async def get_all_clubs(self) -> StoreResult[list[Row]]:
        return await self.find_many({})

    async def get_club_by_id(self, club_id: ClubId) -> StoreResult[Row]:
        return await self.find_one({"id": club_id})

    async def create_club(self, club: Query) -> StoreResult[Row]:
        return await self.create(club)

    async def update_club_by_id(
        self, club_id: ClubId, patch: Query,
    ) -> StoreResult[Row]:
        return await self.update({"id": club_id}, patch)

    async def delete_club_by_id(self, club_id: ClubId) -> StoreResult[Row]:
        return await self.delete({"id": club_id})
