"""
Grilla canchas x franjas horarias a partir de la agenda del día.
Función pura: no toca la base.
"""

from typing import Iterable, Optional

from app.enums.match_status import MatchStatus
from app.schemas.schedule import (
    CellState,
    ScheduleCell,
    ScheduleGrid,
    ScheduleResponse,
    ScheduleRow,
)
from app.utils.slot_times import sort_times

_CELL_STATES = {
    MatchStatus.ORGANIZING: CellState.ORGANIZING,
    MatchStatus.CONFIRMED: CellState.CONFIRMED,
    MatchStatus.BOOKED: CellState.BOOKED,
}


def build_schedule_grid(
    schedule: ScheduleResponse,
    court_ids: Iterable[int],
    current_player_id: Optional[int] = None,
) -> ScheduleGrid:
    court_ids = list(court_ids)
    open_times = set(schedule.slot_times)
    matches_by_cell = {
        (m.court_id, m.time): m
        for m in schedule.matches
        if m.status in _CELL_STATES
    }

    # Las horas con partidos fuera del horario actual también se muestran
    times = sort_times(open_times | {time for _, time in matches_by_cell})

    rows = []
    for time in times:
        requests = [r for r in schedule.time_slot_requests if r.time == time]
        cells = []
        for court_id in court_ids:
            match = matches_by_cell.get((court_id, time))
            if match is None:
                cells.append(ScheduleCell(court_id=court_id, state=CellState.FREE))
                continue
            cells.append(
                ScheduleCell(
                    court_id=court_id,
                    state=_CELL_STATES[match.status],
                    match_id=match.id,
                    player_count=len(match.players),
                    capacity=match.capacity,
                )
            )
        rows.append(
            ScheduleRow(
                time=time,
                is_open=time in open_times,
                requested_by_me=current_player_id is not None
                and any(r.player_id == current_player_id for r in requests),
                request_count=len(requests),
                cells=cells,
            )
        )

    return ScheduleGrid(
        date=schedule.date,
        day_of_week=schedule.day_of_week,
        courts=court_ids,
        rows=rows,
    )
