"""Service test fixtures — ClubService over real repositories, plus fault-injecting fakes.

Invariants:
    - club_service uses the per-test in-memory database
    - FailingClubStore / FailingIdentityStore return STORE_ERROR for every call
"""

import pytest

from club_directory.core.store_result import StoreResult
from club_directory.infrastructure.club_repository import ClubRepository
from club_directory.infrastructure.user_repository import UserRepository
from club_directory.services.club_service import ClubService


class FailingClubStore:
    def __init__(self):
        self.calls: list[str] = []

    async def get_all_clubs(self):
        self.calls.append("get_all_clubs")
        return StoreResult.failed("connection refused", value=[])

    async def get_club_by_id(self, club_id):
        self.calls.append("get_club_by_id")
        return StoreResult.failed("connection refused")

    async def create_club(self, club):
        self.calls.append("create_club")
        return StoreResult.failed("connection refused")

    async def update_club_by_id(self, club_id, patch):
        self.calls.append("update_club_by_id")
        return StoreResult.failed("connection refused")

    async def delete_club_by_id(self, club_id):
        self.calls.append("delete_club_by_id")
        return StoreResult.failed("connection refused")


class FailingIdentityStore:
    async def get_user_by_secret(self, secret):
        return StoreResult.failed("connection refused")


@pytest.fixture
def club_repo(test_db):
    return ClubRepository(test_db)


@pytest.fixture
def club_service(test_db, club_repo):
    return ClubService(club_repo, UserRepository(test_db))


@pytest.fixture
def failing_clubs():
    return FailingClubStore()


@pytest.fixture
def failing_identities():
    return FailingIdentityStore()
