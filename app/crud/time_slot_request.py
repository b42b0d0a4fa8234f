from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from datetime import date
from typing import List, Optional
import logging

from app.models.time_slot_request import TimeSlotRequest
from app.utils.slot_times import validate_slot_time, parse_time_to_minutes

logger = logging.getLogger(__name__)


def get_time_slot_request(
    db: Session, player_id: int, target_date: date, time: str
) -> Optional[TimeSlotRequest]:
    return (
        db.query(TimeSlotRequest)
        .filter(
            TimeSlotRequest.player_id == player_id,
            TimeSlotRequest.date == target_date,
            TimeSlotRequest.time == time,
        )
        .first()
    )


def add_time_slot_request(
    db: Session, player_id: int, target_date: date, time: str
) -> TimeSlotRequest:
    """
    Registra que un jugador quiere jugar en una fecha y hora.
    Si ya existe la solicitud se devuelve la misma, sin duplicarla.
    """
    validate_slot_time(time)

    existing = get_time_slot_request(db, player_id, target_date, time)
    if existing:
        return existing

    db_request = TimeSlotRequest(player_id=player_id, date=target_date, time=time)
    db.add(db_request)
    try:
        db.commit()
    except IntegrityError:
        # Otra solicitud idéntica se guardó en paralelo
        db.rollback()
        existing = get_time_slot_request(db, player_id, target_date, time)
        if existing is None:
            raise
        return existing

    db.refresh(db_request)
    logger.info(
        f"Time slot request {db_request.id}: player {player_id} on {target_date} {time}"
    )
    return db_request


def list_requests_for_date(db: Session, target_date: date) -> List[TimeSlotRequest]:
    requests = (
        db.query(TimeSlotRequest)
        .filter(TimeSlotRequest.date == target_date)
        .order_by(TimeSlotRequest.id)
        .all()
    )
    return sorted(requests, key=lambda r: parse_time_to_minutes(r.time))


def clear_requests_for_slot(
    db: Session, target_date: date, time: str, commit: bool = True
) -> int:
    """Elimina todas las solicitudes de esa fecha y hora, de cualquier jugador."""
    deleted = (
        db.query(TimeSlotRequest)
        .filter(TimeSlotRequest.date == target_date, TimeSlotRequest.time == time)
        .delete()
    )
    if commit:
        db.commit()
    if deleted:
        logger.info(f"Cleared {deleted} time slot requests for {target_date} {time}")
    return deleted
