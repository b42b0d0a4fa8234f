from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class CourtBase(BaseModel):
    name: str
    location: Optional[str] = None
    surface_type: Optional[str] = None
    is_indoor: bool = False
    has_lighting: bool = False
    price_per_hour: Optional[float] = None
    image_url: Optional[str] = None


class CourtCreate(CourtBase):
    pass


class CourtUpdate(BaseModel):
    name: Optional[str] = None
    location: Optional[str] = None
    surface_type: Optional[str] = None
    is_indoor: Optional[bool] = None
    has_lighting: Optional[bool] = None
    price_per_hour: Optional[float] = None
    image_url: Optional[str] = None


class CourtInDB(CourtBase):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True


class CourtResponse(CourtInDB):
    pass


class CourtSummary(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True
