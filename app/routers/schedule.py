from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from datetime import date

from app.database import get_db
from app.crud import court as court_crud
from app.schemas.schedule import ScheduleResponse, ScheduleGrid
from app.services.auth import get_current_user
from app.services.schedule import get_schedule_for_date
from app.utils.schedule_grid import build_schedule_grid
from app.models.player import Player

router = APIRouter()


@router.get("/", response_model=ScheduleResponse)
def read_schedule(
    target_date: date = Query(..., alias="date", description="YYYY-MM-DD"),
    db: Session = Depends(get_db),
    current_user: Player = Depends(get_current_user),
):
    return get_schedule_for_date(db, target_date)


@router.get("/grid", response_model=ScheduleGrid)
def read_schedule_grid(
    target_date: date = Query(..., alias="date", description="YYYY-MM-DD"),
    db: Session = Depends(get_db),
    current_user: Player = Depends(get_current_user),
):
    """
    Courts x slot times for the day, with the state of every cell and the
    slots the current player asked for.
    """
    schedule = get_schedule_for_date(db, target_date)
    courts = court_crud.get_courts(db, limit=1000)
    return build_schedule_grid(
        schedule, [court.id for court in courts], current_player_id=current_user.id
    )
