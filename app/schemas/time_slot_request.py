from pydantic import BaseModel
from datetime import date as date_type, datetime


class TimeSlotRequestCreate(BaseModel):
    date: date_type
    time: str  # Formato "HH:MM"


class TimeSlotRequestResponse(BaseModel):
    id: int
    player_id: int
    date: date_type
    time: str
    created_at: datetime

    class Config:
        from_attributes = True
