from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.crud import opening_hours as crud
from app.schemas.opening_hours import OpeningHoursPayload, OpeningHoursResponse
from app.services.auth import require_admin
from app.models.player import Player

router = APIRouter()


@router.get("/", response_model=OpeningHoursResponse)
def read_opening_hours(db: Session = Depends(get_db)):
    return {"hours": crud.get_opening_hours(db)}


@router.put("/", response_model=OpeningHoursResponse)
def update_opening_hours(
    payload: OpeningHoursPayload,
    db: Session = Depends(get_db),
    current_user: Player = Depends(require_admin),
):
    """
    Replaces the club's opening hours.
    Body: {"hours": {"0": ["09:00", "10:30"], "1": [...], ...}} with 0 = Sunday.
    Days left out are closed.
    """
    return {"hours": crud.update_opening_hours(db, payload.hours)}
