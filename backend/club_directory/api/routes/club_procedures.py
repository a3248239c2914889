"""Club Procedures — JSON remote procedures for the club directory.

Invariants:
    - One POST endpoint per procedure, named exactly as the procedure
    - Routes never contain business logic (delegate to ClubService)
    - Every response is an envelope; refusals are HTTP 200 with success=False
    - Only malformed bodies (wrong types) are rejected by the transport (400)

Design Decisions:
    - Repositories built per request on the request's AsyncSession
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from club_directory.config import get_settings
from club_directory.infrastructure.club_repository import ClubRepository
from club_directory.infrastructure.database import get_db
from club_directory.infrastructure.user_repository import UserRepository
from club_directory.schemas.club import (
    ClubEnvelope, ClubListEnvelope, CreateClubRequest, DeleteClubRequest,
    GetClubRequest, UpdateClubRequest,
)
from club_directory.services.club_service import ClubService

router = APIRouter(prefix="/api/v1/rpc", tags=["clubs"])


def get_club_service(db: AsyncSession = Depends(get_db)) -> ClubService:
    settings = get_settings()
    return ClubService(
        ClubRepository(db),
        UserRepository(db),
        default_image=settings.club_default_image,
        default_linktree=settings.club_default_linktree,
    )


@router.post("/createClub", response_model=ClubEnvelope)
async def create_club(
    body: CreateClubRequest, service: ClubService = Depends(get_club_service),
):
    """Add a club. Requires an ADMIN access token."""
    club = body.club.model_dump(exclude_none=True) if body.club else None
    return await service.create_club(body.access_token, club)


@router.post("/updateClub", response_model=ClubEnvelope)
async def update_club(
    body: UpdateClubRequest, service: ClubService = Depends(get_club_service),
):
    """Patch a club in place. Requires an ADMIN access token."""
    club = body.club.model_dump(exclude_none=True) if body.club else None
    return await service.update_club(body.access_token, club)


@router.post("/deleteClub", response_model=ClubEnvelope)
async def delete_club(
    body: DeleteClubRequest, service: ClubService = Depends(get_club_service),
):
    """Delete a club. Requires an ADMIN access token."""
    return await service.delete_club(body.access_token, body.id)


@router.post("/getClub", response_model=ClubEnvelope)
async def get_club(
    body: GetClubRequest, service: ClubService = Depends(get_club_service),
):
    return await service.get_club(body.id)


@router.post("/getAllClubs", response_model=ClubListEnvelope)
async def get_all_clubs(service: ClubService = Depends(get_club_service)):
    return await service.get_all_clubs()
