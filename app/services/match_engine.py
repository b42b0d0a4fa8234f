"""
Motor de ciclo de vida de los partidos.

Un partido se crea ORGANIZING (el admin lo organiza e invita jugadores) o
directamente BOOKED (un jugador reserva la cancha completa). Pasa a CONFIRMED
cuando el plantel llega a la capacidad. Cualquier partido activo puede
cancelarse, lo que libera la cancha.

Cada operación es una única transacción. Las que leen y escriben el mismo
partido (o la misma franja de cancha) se serializan con locks por clave y
bloqueo de filas. El jugador que entra al plantel o reserva toma además su
propio lock y ocupa una fila en player_slots, única por fecha y hora.
"""

from datetime import date
from typing import Iterable, List
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.crud import court as court_crud
from app.crud import match as match_crud
from app.crud import player as player_crud
from app.crud import time_slot_request as request_crud
from app.enums.match_status import MatchStatus, InvitationResponse
from app.exceptions import (
    SchedulingError,
    NotFound,
    SlotOccupied,
    MatchFull,
    InvalidMatchState,
    PlayerUnavailable,
    NotInvited,
)
from app.models.match import Match, MATCH_CAPACITY
from app.models.player import Player
from app.utils.locks import match_lock, slot_lock, player_lock
from app.utils.slot_times import validate_slot_time

logger = logging.getLogger(__name__)


def _require_player(db: Session, player_id: int) -> Player:
    player = player_crud.get_player(db, player_id)
    if not player:
        raise NotFound(f"Player {player_id} not found")
    return player


def _require_players(db: Session, player_ids: Iterable[int]) -> List[Player]:
    ids = list(dict.fromkeys(player_ids))
    players = player_crud.get_players_by_ids(db, ids)
    found = {player.id for player in players}
    missing = [player_id for player_id in ids if player_id not in found]
    if missing:
        raise NotFound(f"Players not found: {', '.join(str(i) for i in missing)}")
    return players


def _require_match(db: Session, match_id: int) -> Match:
    db_match = match_crud.get_match_for_update(db, match_id)
    if not db_match:
        raise NotFound(f"Match {match_id} not found")
    return db_match


def _ensure_slot_free(db: Session, court_id: int, target_date: date, time: str):
    occupying = match_crud.get_active_match_at_slot(db, court_id, target_date, time)
    if occupying:
        raise SlotOccupied(
            f"Court {court_id} is already taken on {target_date} at {time} "
            f"(match {occupying.id}, {occupying.status.value})"
        )


def _ensure_player_free(
    db: Session, player_id: int, target_date: date, time: str, exclude_match_id=None
):
    # Un jugador no puede estar en dos canchas al mismo tiempo
    busy = match_crud.get_player_active_match_at(
        db, player_id, target_date, time, exclude_match_id=exclude_match_id
    )
    if busy:
        raise PlayerUnavailable(
            f"Player {player_id} already plays on {target_date} at {time} "
            f"(match {busy.id} on court {busy.court_id})"
        )


def _create_in_slot(
    db: Session,
    court_id: int,
    target_date: date,
    time: str,
    player_id: int,
    build,
) -> Match:
    """
    Crea un partido en una franja libre de forma atómica.
    build() arma el Match; si la franja o el jugador se ocupan desde otro
    proceso, las restricciones únicas de la base rechazan el insert.
    """
    with slot_lock(court_id, target_date, time), player_lock(player_id):
        try:
            _ensure_slot_free(db, court_id, target_date, time)
            _ensure_player_free(db, player_id, target_date, time)
            db_match = match_crud.add_match(db, build())
            match_crud.claim_player_slot(db, player_id, db_match)
            if db_match.status == MatchStatus.ORGANIZING:
                request_crud.clear_requests_for_slot(db, target_date, time, commit=False)
            db.commit()
        except IntegrityError:
            db.rollback()
            # Ver cuál de las dos restricciones falló
            _ensure_slot_free(db, court_id, target_date, time)
            raise PlayerUnavailable(
                f"Player {player_id} already plays on {target_date} at {time}"
            )
        except SchedulingError:
            db.rollback()
            raise

    db.refresh(db_match)
    return db_match


def create_match_and_invite(
    db: Session,
    court_id: int,
    target_date: date,
    time: str,
    organizer_id: int,
    invited_player_ids: Iterable[int] = (),
) -> Match:
    """
    Crea un partido en organización con el organizador como primer jugador
    e invita al resto. Las solicitudes de franja para esa fecha y hora se
    eliminan, sin importar la cancha.
    """
    validate_slot_time(time)
    if not court_crud.get_court(db, court_id):
        raise NotFound(f"Court {court_id} not found")
    organizer = _require_player(db, organizer_id)
    invitees = _require_players(
        db, [pid for pid in invited_player_ids if pid != organizer.id]
    )

    def build() -> Match:
        db_match = Match(
            court_id=court_id,
            date=target_date,
            time=time,
            capacity=MATCH_CAPACITY,
            status=MatchStatus.ORGANIZING,
            organizer_id=organizer.id,
        )
        db_match.players.append(organizer)
        db_match.invited_players.extend(invitees)
        return db_match

    db_match = _create_in_slot(db, court_id, target_date, time, organizer.id, build)
    logger.info(
        f"Match {db_match.id} organized by player {organizer.id} on court {court_id} "
        f"{target_date} {time}, invited {db_match.invited_player_ids}"
    )
    return db_match


def book_court(
    db: Session, court_id: int, target_date: date, time: str, player_id: int
) -> Match:
    """Reserva la cancha completa: el partido no tiene plantel ni invitaciones."""
    validate_slot_time(time)
    if not court_crud.get_court(db, court_id):
        raise NotFound(f"Court {court_id} not found")
    player = _require_player(db, player_id)

    def build() -> Match:
        return Match(
            court_id=court_id,
            date=target_date,
            time=time,
            capacity=MATCH_CAPACITY,
            status=MatchStatus.BOOKED,
            booked_by_id=player.id,
        )

    db_match = _create_in_slot(db, court_id, target_date, time, player.id, build)
    logger.info(
        f"Court {court_id} booked by player {player.id} on {target_date} {time} "
        f"(match {db_match.id})"
    )
    return db_match


def invite_players_to_match(
    db: Session, match_id: int, player_ids: Iterable[int]
) -> Match:
    """Agrega invitados, salteando a quienes ya juegan o ya están invitados."""
    with match_lock(match_id):
        try:
            db_match = _require_match(db, match_id)
            if db_match.status != MatchStatus.ORGANIZING:
                raise InvalidMatchState(
                    f"Match {match_id} is {db_match.status.value}, cannot invite players"
                )
            players = _require_players(db, player_ids)

            known = set(db_match.player_ids) | set(db_match.invited_player_ids)
            added = []
            for player in players:
                if player.id in known:
                    continue
                db_match.invited_players.append(player)
                known.add(player.id)
                added.append(player.id)
            db.commit()
        except SchedulingError:
            db.rollback()
            raise

    db.refresh(db_match)
    if added:
        logger.info(f"Match {match_id}: invited players {added}")
    return db_match


def respond_to_invitation(
    db: Session, match_id: int, player_id: int, response: InvitationResponse
) -> Match:
    """
    Respuesta de un jugador a la invitación.

    El chequeo de capacidad y el alta del jugador ocurren bajo el lock del
    partido, así dos aceptaciones simultáneas no pueden superar la capacidad.
    El lock del jugador evita que acepte a la vez dos partidos de la misma hora.
    """
    response = InvitationResponse(response)
    with match_lock(match_id), player_lock(player_id):
        try:
            db_match = _require_match(db, match_id)
            if db_match.status in (MatchStatus.BOOKED, MatchStatus.CANCELLED):
                raise InvalidMatchState(
                    f"Match {match_id} is {db_match.status.value}, it has no invitations"
                )
            player = _require_player(db, player_id)

            was_invited = player.id in db_match.invited_player_ids
            if was_invited:
                db_match.invited_players.remove(player)

            if response == InvitationResponse.DECLINE:
                db.commit()
                if was_invited:
                    logger.info(f"Match {match_id}: player {player.id} declined")
            elif db_match.is_full:
                raise MatchFull(
                    f"Match {match_id} already has {db_match.capacity} players"
                )
            elif player.id in db_match.player_ids:
                # Aceptación duplicada
                db.commit()
            else:
                if not was_invited:
                    raise NotInvited(
                        f"Player {player.id} was not invited to match {match_id}"
                    )
                _ensure_player_free(
                    db,
                    player.id,
                    db_match.date,
                    db_match.time,
                    exclude_match_id=db_match.id,
                )

                db_match.players.append(player)
                match_crud.claim_player_slot(db, player.id, db_match)
                if len(db_match.players) >= db_match.capacity:
                    # Partido completo: las invitaciones restantes ya no aplican
                    db_match.status = MatchStatus.CONFIRMED
                    db_match.invited_players = []
                db.commit()
                logger.info(
                    f"Match {match_id}: player {player.id} accepted "
                    f"({len(db_match.players)}/{db_match.capacity})"
                )
                if db_match.status == MatchStatus.CONFIRMED:
                    logger.info(f"Match {match_id} confirmed")
        except IntegrityError:
            db.rollback()
            raise PlayerUnavailable(
                f"Player {player_id} already plays at the time of match {match_id}"
            )
        except SchedulingError:
            db.rollback()
            raise

    db.refresh(db_match)
    return db_match


def cancel_match(db: Session, match_id: int) -> Match:
    """Cancela el partido o la reserva y libera la cancha."""
    with match_lock(match_id):
        try:
            db_match = _require_match(db, match_id)
            if db_match.status == MatchStatus.CANCELLED:
                raise InvalidMatchState(f"Match {match_id} is already cancelled")
            previous = db_match.status
            db_match.status = MatchStatus.CANCELLED
            db_match.invited_players = []
            # El plantel se conserva, pero sus jugadores quedan libres a esa hora
            match_crud.release_player_slots(db, match_id)
            db.commit()
        except SchedulingError:
            db.rollback()
            raise

    db.refresh(db_match)
    logger.info(f"Match {match_id} cancelled (was {previous.value})")
    return db_match


def get_match(db: Session, match_id: int) -> Match:
    db_match = match_crud.get_match(db, match_id)
    if not db_match:
        raise NotFound(f"Match {match_id} not found")
    return db_match


def list_invitations_for_player(db: Session, player_id: int) -> List[Match]:
    return match_crud.get_invited_matches(db, player_id)
