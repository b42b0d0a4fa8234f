from pydantic import BaseModel
from typing import List, Optional
from datetime import date as date_type
from enum import Enum

from app.schemas.match import MatchResponse
from app.schemas.time_slot_request import TimeSlotRequestResponse


class ScheduleResponse(BaseModel):
    date: date_type
    day_of_week: int
    slot_times: List[str]
    matches: List[MatchResponse]
    time_slot_requests: List[TimeSlotRequestResponse]


class CellState(str, Enum):
    FREE = "FREE"
    ORGANIZING = "ORGANIZING"
    CONFIRMED = "CONFIRMED"
    BOOKED = "BOOKED"


class ScheduleCell(BaseModel):
    court_id: int
    state: CellState
    match_id: Optional[int] = None
    player_count: int = 0
    capacity: Optional[int] = None


class ScheduleRow(BaseModel):
    time: str
    is_open: bool
    requested_by_me: bool = False
    request_count: int = 0
    cells: List[ScheduleCell]


class ScheduleGrid(BaseModel):
    date: date_type
    day_of_week: int
    courts: List[int]
    rows: List[ScheduleRow]
