"""
Arma la agenda de un día: franjas abiertas, partidos y solicitudes.
Solo lectura; toda mutación pasa por el motor de partidos y las solicitudes.
"""

from datetime import date
from sqlalchemy.orm import Session

from app.crud import match as match_crud
from app.crud import opening_hours as opening_hours_crud
from app.crud import time_slot_request as request_crud
from app.schemas.match import MatchResponse
from app.schemas.schedule import ScheduleResponse
from app.schemas.time_slot_request import TimeSlotRequestResponse
from app.utils.slot_times import day_of_week


def get_schedule_for_date(db: Session, target_date: date) -> ScheduleResponse:
    weekday = day_of_week(target_date)
    slot_times = opening_hours_crud.get_slot_times_for_day(db, weekday)

    # Los partidos se devuelven aunque su hora ya no esté en el horario de apertura
    matches = match_crud.get_matches_for_date(db, target_date)
    requests = request_crud.list_requests_for_date(db, target_date)

    return ScheduleResponse(
        date=target_date,
        day_of_week=weekday,
        slot_times=slot_times,
        matches=[MatchResponse.model_validate(m) for m in matches],
        time_slot_requests=[
            TimeSlotRequestResponse.model_validate(r) for r in requests
        ],
    )
