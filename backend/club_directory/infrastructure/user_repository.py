"""User Repository — identity lookups with fixed projections.

Invariants:
    - password is never returned by any method here
    - secret is returned only by the single-user lookups (the caller already
      holds it, or is the identity provider resolving its own user)
    - get_all_users_secure returns neither password nor secret
"""

from club_directory.core.repository_protocols import Row
from club_directory.core.store_result import StoreResult
from club_directory.infrastructure.repository import SqlRepository
from club_directory.models.user import User

IDENTITY_FIELDS = ("id", "name", "email", "image", "permissions", "roles")
IDENTITY_FIELDS_WITH_SECRET = IDENTITY_FIELDS + ("secret",)


class UserRepository(SqlRepository):
    model = User
    sensitive_fields = frozenset({"password", "secret"})

    async def get_all_users_secure(self) -> StoreResult[list[Row]]:
        return await self.find_many({}, fields=IDENTITY_FIELDS)

    async def get_user_by_email(self, email: str) -> StoreResult[Row]:
        return await self.find_one(
            {"email": email}, fields=IDENTITY_FIELDS_WITH_SECRET,
        )

    async def get_user_by_secret(self, secret: str) -> StoreResult[Row]:
        return await self.find_one(
            {"secret": secret}, fields=IDENTITY_FIELDS_WITH_SECRET,
        )
