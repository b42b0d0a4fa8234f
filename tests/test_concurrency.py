"""
Tests de concurrencia: varias sesiones compitiendo por el último lugar de un
partido o por la misma franja de cancha. Usa una base SQLite en archivo para
que cada hilo tenga su propia conexión.
"""
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.database import Base
from app.enums.match_status import MatchStatus, InvitationResponse
from app.exceptions import MatchFull, SlotOccupied, PlayerUnavailable
from app.models.court import Court
from app.services import match_engine
from app.utils.slot_times import SLOT_GRID

from conftest import MATCH_DAY, make_player


@pytest.fixture
def session_factory(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'concurrency.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    try:
        yield factory
    finally:
        engine.dispose()


def _run_concurrently(factory, worker, args):
    barrier = threading.Barrier(len(args))

    def run(arg):
        db = factory()
        try:
            barrier.wait()
            return worker(db, arg)
        finally:
            db.close()

    with ThreadPoolExecutor(max_workers=len(args)) as pool:
        return list(pool.map(run, args))


def test_concurrent_accepts_on_last_seat(session_factory):
    """
    Test: con un solo lugar libre, de N aceptaciones simultáneas exactamente
    una entra y el resto recibe MatchFull
    """
    db = session_factory()
    organizer = make_player(db, "Organizer")
    first, second = make_player(db, "First"), make_player(db, "Second")
    contenders = [make_player(db, f"Contender{i}") for i in range(6)]
    court = Court(name="Pista Central")
    db.add(court)
    db.commit()

    match = match_engine.create_match_and_invite(
        db,
        court.id,
        MATCH_DAY,
        "18:00",
        organizer.id,
        [first.id, second.id] + [p.id for p in contenders],
    )
    match_engine.respond_to_invitation(db, match.id, first.id, InvitationResponse.ACCEPT)
    match_engine.respond_to_invitation(db, match.id, second.id, InvitationResponse.ACCEPT)
    match_id = match.id
    contender_ids = [p.id for p in contenders]
    db.close()

    def accept(session, player_id):
        try:
            match_engine.respond_to_invitation(
                session, match_id, player_id, InvitationResponse.ACCEPT
            )
            return "accepted"
        except MatchFull:
            return "full"

    results = _run_concurrently(session_factory, accept, contender_ids)

    assert results.count("accepted") == 1
    assert results.count("full") == len(contender_ids) - 1

    db = session_factory()
    try:
        final = match_engine.get_match(db, match_id)
        assert len(final.players) == final.capacity == 4
        assert final.status == MatchStatus.CONFIRMED
        assert final.invited_player_ids == []
    finally:
        db.close()


def test_concurrent_bookings_on_same_slot(session_factory):
    """
    Test: varias reservas simultáneas de la misma cancha, fecha y hora;
    solo una se crea
    """
    db = session_factory()
    bookers = [make_player(db, f"Booker{i}") for i in range(5)]
    court = Court(name="Pista Central")
    db.add(court)
    db.commit()
    court_id = court.id
    booker_ids = [p.id for p in bookers]
    db.close()

    def book(session, player_id):
        try:
            match_engine.book_court(session, court_id, MATCH_DAY, "19:30", player_id)
            return "booked"
        except SlotOccupied:
            return "occupied"

    results = _run_concurrently(session_factory, book, booker_ids)

    assert results.count("booked") == 1
    assert results.count("occupied") == len(booker_ids) - 1


def test_player_cannot_accept_two_courts_at_the_same_time(session_factory):
    """
    Test: un jugador invitado a dos partidos de la misma hora en canchas
    distintas acepta ambos a la vez; solo una aceptación entra
    """
    db = session_factory()
    organizer_a = make_player(db, "OrganizerA")
    organizer_b = make_player(db, "OrganizerB")
    player = make_player(db, "Player")
    court_a, court_b = Court(name="Pista A"), Court(name="Pista B")
    db.add_all([court_a, court_b])
    db.commit()

    match_pairs = []
    for time in SLOT_GRID[:5]:
        match_a = match_engine.create_match_and_invite(
            db, court_a.id, MATCH_DAY, time, organizer_a.id, [player.id]
        )
        match_b = match_engine.create_match_and_invite(
            db, court_b.id, MATCH_DAY, time, organizer_b.id, [player.id]
        )
        match_pairs.append((match_a.id, match_b.id))
    player_id = player.id
    db.close()

    def accept(session, match_id):
        try:
            match_engine.respond_to_invitation(
                session, match_id, player_id, InvitationResponse.ACCEPT
            )
            return "accepted"
        except PlayerUnavailable:
            return "unavailable"

    for pair in match_pairs:
        results = _run_concurrently(session_factory, accept, list(pair))
        assert sorted(results) == ["accepted", "unavailable"]

        db = session_factory()
        try:
            rosters = [match_engine.get_match(db, match_id).player_ids for match_id in pair]
            assert sum(player_id in roster for roster in rosters) == 1
        finally:
            db.close()


def test_player_cannot_book_two_courts_at_the_same_time(session_factory):
    db = session_factory()
    player = make_player(db, "Booker")
    courts = [Court(name=f"Pista {i}") for i in range(4)]
    db.add_all(courts)
    db.commit()
    court_ids = [court.id for court in courts]
    player_id = player.id
    db.close()

    def book(session, court_id):
        try:
            match_engine.book_court(session, court_id, MATCH_DAY, "21:00", player_id)
            return "booked"
        except PlayerUnavailable:
            return "unavailable"

    results = _run_concurrently(session_factory, book, court_ids)

    assert results.count("booked") == 1
    assert results.count("unavailable") == len(court_ids) - 1
