"""
Tests para la agenda del día y la grilla canchas x horarios
"""
from datetime import timedelta

from app.crud import opening_hours as opening_hours_crud
from app.crud import time_slot_request as request_crud
from app.enums.match_status import MatchStatus, InvitationResponse
from app.schemas.schedule import CellState
from app.services import match_engine
from app.services.schedule import get_schedule_for_date
from app.utils.schedule_grid import build_schedule_grid

from conftest import MATCH_DAY


def _open_tuesday(db, times):
    opening_hours_crud.update_opening_hours(db, {"2": times})


def test_schedule_for_date(db, courts, admin, players):
    _open_tuesday(db, ["21:00", "18:00", "19:30"])
    organized = match_engine.create_match_and_invite(
        db, courts[0].id, MATCH_DAY, "18:00", admin.id, [players[0].id]
    )
    booked = match_engine.book_court(db, courts[1].id, MATCH_DAY, "18:00", players[1].id)
    match_engine.book_court(db, courts[0].id, MATCH_DAY + timedelta(days=1), "18:00", players[1].id)
    request_crud.add_time_slot_request(db, players[2].id, MATCH_DAY, "21:00")

    schedule = get_schedule_for_date(db, MATCH_DAY)

    assert schedule.day_of_week == 2
    assert schedule.slot_times == ["18:00", "19:30", "21:00"]
    assert [m.id for m in schedule.matches] == [organized.id, booked.id]
    assert [(r.player_id, r.time) for r in schedule.time_slot_requests] == [
        (players[2].id, "21:00")
    ]


def test_matches_outside_opening_hours_stay_visible(db, court, players):
    _open_tuesday(db, ["09:00", "10:30"])
    booked = match_engine.book_court(db, court.id, MATCH_DAY, "21:00", players[0].id)

    # El club cierra los martes después de reservar
    _open_tuesday(db, [])
    schedule = get_schedule_for_date(db, MATCH_DAY)

    assert schedule.slot_times == []
    assert [m.id for m in schedule.matches] == [booked.id]


def test_cancelled_matches_are_not_in_the_schedule(db, court, players):
    booked = match_engine.book_court(db, court.id, MATCH_DAY, "12:00", players[0].id)
    match_engine.cancel_match(db, booked.id)

    assert get_schedule_for_date(db, MATCH_DAY).matches == []


def test_grid_cells(db, courts, admin, players):
    _open_tuesday(db, ["18:00", "19:30"])
    organized = match_engine.create_match_and_invite(
        db, courts[0].id, MATCH_DAY, "18:00", admin.id, [p.id for p in players[:3]]
    )
    for player in players[:3]:
        match_engine.respond_to_invitation(
            db, organized.id, player.id, InvitationResponse.ACCEPT
        )
    booked = match_engine.book_court(db, courts[1].id, MATCH_DAY, "21:00", players[4].id)
    request_crud.add_time_slot_request(db, players[5].id, MATCH_DAY, "19:30")
    request_crud.add_time_slot_request(db, players[4].id, MATCH_DAY, "19:30")

    schedule = get_schedule_for_date(db, MATCH_DAY)
    grid = build_schedule_grid(
        schedule, [c.id for c in courts], current_player_id=players[5].id
    )

    assert [row.time for row in grid.rows] == ["18:00", "19:30", "21:00"]
    first, second, third = grid.rows

    assert first.is_open
    assert first.cells[0].state == CellState.CONFIRMED
    assert first.cells[0].match_id == organized.id
    assert first.cells[0].player_count == 4
    assert first.cells[1].state == CellState.FREE

    assert second.requested_by_me
    assert second.request_count == 2
    assert all(cell.state == CellState.FREE for cell in second.cells)

    # 21:00 no está en el horario pero hay una reserva
    assert not third.is_open
    assert third.cells[1].state == CellState.BOOKED
    assert third.cells[1].match_id == booked.id
    assert not third.requested_by_me


def test_grid_shows_organizing_matches(db, court, admin):
    _open_tuesday(db, ["09:00"])
    match = match_engine.create_match_and_invite(db, court.id, MATCH_DAY, "09:00", admin.id, [])
    assert match.status == MatchStatus.ORGANIZING

    grid = build_schedule_grid(get_schedule_for_date(db, MATCH_DAY), [court.id])

    cell = grid.rows[0].cells[0]
    assert cell.state == CellState.ORGANIZING
    assert cell.player_count == 1
    assert cell.capacity == 4
