from sqlalchemy import or_, select
from sqlalchemy.orm import Session
from datetime import date
from typing import List, Optional

from app.enums.match_status import MatchStatus, ACTIVE_MATCH_STATUSES
from app.models.match import Match, match_players, match_invitations
from app.models.player_slot import PlayerSlot
from app.utils.slot_times import parse_time_to_minutes


def get_match(db: Session, match_id: int) -> Optional[Match]:
    return db.query(Match).filter(Match.id == match_id).first()


def get_match_for_update(db: Session, match_id: int) -> Optional[Match]:
    """Lee el partido con bloqueo de fila y descartando el estado cacheado en la sesión."""
    return (
        db.query(Match)
        .filter(Match.id == match_id)
        .populate_existing()
        .with_for_update(nowait=False)
        .first()
    )


def get_active_match_at_slot(
    db: Session, court_id: int, target_date: date, time: str
) -> Optional[Match]:
    return (
        db.query(Match)
        .filter(
            Match.court_id == court_id,
            Match.date == target_date,
            Match.time == time,
            Match.status.in_(ACTIVE_MATCH_STATUSES),
        )
        .populate_existing()
        .first()
    )


def get_matches_for_date(
    db: Session, target_date: date, include_cancelled: bool = False
) -> List[Match]:
    query = db.query(Match).filter(Match.date == target_date)
    if not include_cancelled:
        query = query.filter(Match.status.in_(ACTIVE_MATCH_STATUSES))
    matches = query.order_by(Match.court_id, Match.id).all()
    return sorted(matches, key=lambda m: (parse_time_to_minutes(m.time), m.court_id))


def get_player_active_match_at(
    db: Session,
    player_id: int,
    target_date: date,
    time: str,
    exclude_match_id: Optional[int] = None,
) -> Optional[Match]:
    """
    Busca un partido activo en esa fecha y hora donde el jugador ya juega
    (está en el plantel o reservó la cancha completa).
    """
    in_roster = select(match_players.c.match_id).where(
        match_players.c.player_id == player_id
    )
    query = db.query(Match).filter(
        Match.date == target_date,
        Match.time == time,
        Match.status.in_(ACTIVE_MATCH_STATUSES),
        or_(Match.id.in_(in_roster), Match.booked_by_id == player_id),
    )
    if exclude_match_id is not None:
        query = query.filter(Match.id != exclude_match_id)
    return query.first()


def get_invited_matches(db: Session, player_id: int) -> List[Match]:
    """Partidos en organización donde el jugador tiene una invitación pendiente."""
    invited = select(match_invitations.c.match_id).where(
        match_invitations.c.player_id == player_id
    )
    matches = (
        db.query(Match)
        .filter(Match.id.in_(invited), Match.status == MatchStatus.ORGANIZING)
        .all()
    )
    return sorted(matches, key=lambda m: (m.date, parse_time_to_minutes(m.time)))


def add_match(db: Session, db_match: Match) -> Match:
    """Agrega el partido a la transacción en curso sin confirmarla."""
    db.add(db_match)
    db.flush()
    return db_match


def claim_player_slot(db: Session, player_id: int, db_match: Match) -> PlayerSlot:
    """
    Marca al jugador como ocupado en la fecha y hora del partido.
    Si ya juega en otro partido a esa hora el flush falla con IntegrityError.
    """
    slot = PlayerSlot(
        player_id=player_id,
        match_id=db_match.id,
        date=db_match.date,
        time=db_match.time,
    )
    db.add(slot)
    db.flush()
    return slot


def release_player_slots(db: Session, match_id: int) -> int:
    return db.query(PlayerSlot).filter(PlayerSlot.match_id == match_id).delete()
