from pydantic import BaseModel
from typing import Dict, List


class OpeningHoursPayload(BaseModel):
    # Claves "0".."6" (0 = domingo) -> horas "HH:MM"
    hours: Dict[str, List[str]]


class OpeningHoursResponse(BaseModel):
    hours: Dict[int, List[str]]
