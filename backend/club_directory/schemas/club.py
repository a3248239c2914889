"""Club Schemas — request bodies and response envelopes for the club procedures.

Invariants:
    - Request bodies check field TYPES only; presence and length of club fields
      are checked by the club service after authorization
    - Wire names are camelCase (accessToken); Python attributes are snake_case
    - ClubEnvelope.club is None whenever success is False

Design Decisions:
    - populate_by_name=True: tests and internal callers may use either name
"""

from pydantic import BaseModel, ConfigDict, Field


class ClubFields(BaseModel):
    """Caller-supplied club data for createClub."""
    name: str | None = None
    description: str | None = None
    linktree: str | None = None
    image: str | None = None


class ClubPatch(ClubFields):
    """Caller-supplied club data for updateClub; id locates the row."""
    id: str | None = None


class CreateClubRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(alias="accessToken")
    club: ClubFields | None = None


class UpdateClubRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(alias="accessToken")
    club: ClubPatch | None = None


class DeleteClubRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(alias="accessToken")
    id: str | None = None


class GetClubRequest(BaseModel):
    id: str | None = None


class ClubOut(BaseModel):
    """Club as returned to callers."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
    linktree: str = ""
    image: str


class ClubEnvelope(BaseModel):
    success: bool
    club: ClubOut | None = None


class ClubListEnvelope(BaseModel):
    success: bool
    clubs: list[ClubOut] = Field(default_factory=list)
