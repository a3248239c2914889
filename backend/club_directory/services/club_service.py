"""Club Service — the five club procedures behind authorization and validation gates.

Invariants:
    - Mutations (create/update/delete) check authorization BEFORE validation,
      and validation before any write
    - Only identities whose permissions include ADMIN may mutate
    - Every procedure returns an envelope; success=False always pairs with club=None
    - Refusals are never raised to the caller; each one is classified with a
      ClubDirectoryError and logged with its code
    - getAllClubs reports success with an empty list when the store fails
    - Store faults and missing rows produce the same envelope but distinct log lines

Design Decisions:
    - Repositories are injected (ClubStore / IdentityStore protocols): routes
      build them per request, tests may pass fakes
    - Internal flow raises typed errors; the public methods are the single
      place where they collapse into the refusal envelope
"""

import logging
import uuid
from typing import Any, Mapping

from club_directory.core.domain_types import (
    ClubId, Procedure, DEFAULT_CLUB_IMAGE, DEFAULT_CLUB_LINKTREE,
)
from club_directory.core.enforce_club_rules import (
    build_club_patch, build_club_payload, check_club_fields, check_club_id, provided,
)
from club_directory.core.enforce_permissions import is_admin
from club_directory.core.errors import (
    ClubDirectoryError, DatabaseError, ErrorContext, ErrorSeverity,
    InvalidClubError, NotAuthorizedError, ResourceNotFoundError,
)
from club_directory.core.repository_protocols import ClubStore, IdentityStore, Row
from club_directory.core.store_result import StoreResult

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.ERROR,
}


def refused() -> dict:
    return {"success": False, "club": None}


class ClubService:
    """createClub / updateClub / deleteClub / getClub / getAllClubs."""

    def __init__(
        self,
        clubs: ClubStore,
        users: IdentityStore,
        default_image: str = DEFAULT_CLUB_IMAGE,
        default_linktree: str = DEFAULT_CLUB_LINKTREE,
    ):
        self.clubs = clubs
        self.users = users
        self.default_image = default_image
        self.default_linktree = default_linktree

    # ─── Mutations ───────────────────────────────────────────────

    async def create_club(
        self, access_token: str | None, club: Mapping[str, Any] | None,
    ) -> dict:
        ctx = ErrorContext(procedure=Procedure.CREATE_CLUB.value)
        try:
            await self._authorize(access_token, ctx)
            self._validate(club, ctx)
            payload = build_club_payload(
                club, self.default_image, self.default_linktree,
            )
            payload["id"] = str(uuid.uuid4())
            ctx.club_id = payload["id"]
            created = self._unwrap(
                await self.clubs.create_club(payload), "create", ctx,
            )
        except ClubDirectoryError as e:
            return self._refuse(e)
        logger.info(
            f"Club '{created['name']}' created",
            extra=self._log_extra(ctx),
        )
        return {"success": True, "club": created}

    async def update_club(
        self, access_token: str | None, club: Mapping[str, Any] | None,
    ) -> dict:
        ctx = ErrorContext(procedure=Procedure.UPDATE_CLUB.value)
        club = club or {}
        try:
            await self._authorize(access_token, ctx)
            self._validate_id(club.get("id"), ctx)
            ctx.club_id = club["id"]
            self._validate(club, ctx)
            patch = build_club_patch(club, self.default_image)
            updated = self._unwrap(
                await self.clubs.update_club_by_id(ClubId(club["id"]), patch),
                "update", ctx,
            )
        except ClubDirectoryError as e:
            return self._refuse(e)
        logger.info("Club updated", extra=self._log_extra(ctx))
        return {"success": True, "club": updated}

    async def delete_club(
        self, access_token: str | None, club_id: str | None,
    ) -> dict:
        ctx = ErrorContext(procedure=Procedure.DELETE_CLUB.value)
        try:
            await self._authorize(access_token, ctx)
            self._validate_id(club_id, ctx)
            ctx.club_id = club_id
            deleted = self._unwrap(
                await self.clubs.delete_club_by_id(ClubId(club_id)),
                "delete", ctx,
            )
        except ClubDirectoryError as e:
            return self._refuse(e)
        logger.info("Club deleted", extra=self._log_extra(ctx))
        return {"success": True, "club": deleted}

    # ─── Public reads ────────────────────────────────────────────

    async def get_club(self, club_id: str | None) -> dict:
        ctx = ErrorContext(procedure=Procedure.GET_CLUB.value, club_id=club_id)
        try:
            self._validate_id(club_id, ctx)
            club = self._unwrap(
                await self.clubs.get_club_by_id(ClubId(club_id)), "query", ctx,
            )
        except ClubDirectoryError as e:
            return self._refuse(e)
        return {"success": True, "club": club}

    async def get_all_clubs(self) -> dict:
        result = await self.clubs.get_all_clubs()
        if result.is_store_error:
            logger.error(
                f"Club listing failed, returning empty list: {result.error}",
                extra={
                    "procedure": Procedure.GET_ALL_CLUBS.value,
                    "error_code": "DATABASE_ERROR",
                },
            )
        return {"success": True, "clubs": list(result.value or [])}

    # ─── Gates ───────────────────────────────────────────────────

    async def _authorize(self, access_token: str | None, ctx: ErrorContext) -> Row:
        """Resolve the token to an ADMIN identity or raise NotAuthorizedError."""
        if not provided(access_token):
            raise NotAuthorizedError(ctx)
        result = await self.users.get_user_by_secret(access_token)
        if result.is_store_error:
            logger.error(
                f"Identity lookup failed: {result.error}",
                extra=self._log_extra(ctx, "DATABASE_ERROR"),
            )
            raise NotAuthorizedError(ctx)
        if not result.ok:
            raise NotAuthorizedError(ctx)
        identity = result.value
        ctx.user_id = identity.get("id")
        if not is_admin(identity):
            raise NotAuthorizedError(ctx)
        return identity

    def _validate(self, club: Mapping[str, Any] | None, ctx: ErrorContext) -> None:
        error = check_club_fields(club)
        if error:
            raise InvalidClubError(error["message"], error["field"], ctx)

    def _validate_id(self, club_id: Any, ctx: ErrorContext) -> None:
        error = check_club_id(club_id)
        if error:
            raise InvalidClubError(error["message"], error["field"], ctx)

    # ─── Envelope helpers ────────────────────────────────────────

    def _unwrap(
        self, result: StoreResult[Row], operation: str, ctx: ErrorContext,
    ) -> Row:
        if result.ok:
            return result.value
        if result.is_store_error:
            raise DatabaseError(result.error or "unknown", operation, ctx)
        raise ResourceNotFoundError("Club", ctx.club_id or "", ctx)

    def _refuse(self, error: ClubDirectoryError) -> dict:
        logger.log(
            _LOG_LEVELS[error.severity],
            f"{error.context.procedure} refused: {error.message}",
            extra=self._log_extra(error.context, error.code),
        )
        return refused()

    @staticmethod
    def _log_extra(ctx: ErrorContext, error_code: str | None = None) -> dict:
        return {
            "procedure": ctx.procedure,
            "club_id": ctx.club_id,
            "user_id": ctx.user_id,
            "error_code": error_code,
        }
