from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import date as date_type, datetime

from app.enums.match_status import MatchStatus, InvitationResponse
from app.schemas.court import CourtSummary
from app.schemas.player import PlayerSummary


class MatchCreate(BaseModel):
    court_id: int
    date: date_type
    time: str  # Formato "HH:MM"
    invited_player_ids: List[int] = Field(default_factory=list)


class CourtBookingCreate(BaseModel):
    court_id: int
    date: date_type
    time: str  # Formato "HH:MM"


class MatchInvite(BaseModel):
    player_ids: List[int]


class RespondToInvitationRequest(BaseModel):
    response: InvitationResponse


class MatchResponse(BaseModel):
    id: int
    court_id: int
    court: CourtSummary
    date: date_type
    time: str
    capacity: int
    status: MatchStatus
    players: List[PlayerSummary]
    invited_player_ids: List[int]
    organizer_id: Optional[int] = None
    booked_by_id: Optional[int] = None
    created_at: datetime

    class Config:
        from_attributes = True
