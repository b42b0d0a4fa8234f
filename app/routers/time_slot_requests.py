from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List
from datetime import date

from app.database import get_db
from app.crud import time_slot_request as crud
from app.schemas.time_slot_request import (
    TimeSlotRequestCreate,
    TimeSlotRequestResponse,
)
from app.services.auth import get_current_user
from app.models.player import Player

router = APIRouter()


@router.post("/", response_model=TimeSlotRequestResponse)
def add_time_slot_request(
    request: TimeSlotRequestCreate,
    db: Session = Depends(get_db),
    current_user: Player = Depends(get_current_user),
):
    """Signals that the current player wants to play at that date and time."""
    return crud.add_time_slot_request(db, current_user.id, request.date, request.time)


@router.get("/", response_model=List[TimeSlotRequestResponse])
def read_time_slot_requests(
    target_date: date = Query(..., alias="date", description="YYYY-MM-DD"),
    db: Session = Depends(get_db),
    current_user: Player = Depends(get_current_user),
):
    return crud.list_requests_for_date(db, target_date)
