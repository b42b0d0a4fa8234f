from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from app.database import get_db
from app.schemas.match import (
    MatchResponse,
    MatchCreate,
    MatchInvite,
    CourtBookingCreate,
    RespondToInvitationRequest,
)
from app.services import match_engine
from app.services.auth import get_current_user, require_admin
from app.models.player import Player

router = APIRouter()


@router.post("/", response_model=MatchResponse)
def create_match(
    match: MatchCreate,
    db: Session = Depends(get_db),
    current_user: Player = Depends(require_admin),
):
    """Creates a match on a free slot with the admin as organizer and sends invitations."""
    return match_engine.create_match_and_invite(
        db,
        court_id=match.court_id,
        target_date=match.date,
        time=match.time,
        organizer_id=current_user.id,
        invited_player_ids=match.invited_player_ids,
    )


@router.post("/book", response_model=MatchResponse)
def book_court(
    booking: CourtBookingCreate,
    db: Session = Depends(get_db),
    current_user: Player = Depends(get_current_user),
):
    """Books the whole court for the current player."""
    return match_engine.book_court(
        db,
        court_id=booking.court_id,
        target_date=booking.date,
        time=booking.time,
        player_id=current_user.id,
    )


@router.get("/invitations/me", response_model=List[MatchResponse])
def read_my_invitations(
    db: Session = Depends(get_db),
    current_user: Player = Depends(get_current_user),
):
    return match_engine.list_invitations_for_player(db, current_user.id)


@router.get("/{match_id}", response_model=MatchResponse)
def read_match(
    match_id: int,
    db: Session = Depends(get_db),
    current_user: Player = Depends(get_current_user),
):
    return match_engine.get_match(db, match_id)


@router.post("/{match_id}/invitations", response_model=MatchResponse)
def invite_players(
    match_id: int,
    invite: MatchInvite,
    db: Session = Depends(get_db),
    current_user: Player = Depends(require_admin),
):
    return match_engine.invite_players_to_match(db, match_id, invite.player_ids)


@router.post("/{match_id}/respond", response_model=MatchResponse)
def respond_to_invitation(
    match_id: int,
    request: RespondToInvitationRequest,
    db: Session = Depends(get_db),
    current_user: Player = Depends(get_current_user),
):
    """
    Answer an invitation.
    Body: {"response": "ACCEPT" | "DECLINE"}
    """
    return match_engine.respond_to_invitation(
        db, match_id, current_user.id, request.response
    )


@router.post("/{match_id}/cancel", response_model=MatchResponse)
def cancel_match(
    match_id: int,
    db: Session = Depends(get_db),
    current_user: Player = Depends(get_current_user),
):
    db_match = match_engine.get_match(db, match_id)
    # Solo el admin, el organizador o quien reservó pueden cancelar
    if not current_user.is_admin and current_user.id not in (
        db_match.organizer_id,
        db_match.booked_by_id,
    ):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only the organizer, the booker or an admin can cancel this match",
        )
    return match_engine.cancel_match(db, match_id)
