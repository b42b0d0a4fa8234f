from pydantic import BaseModel, EmailStr
from typing import Optional
from datetime import datetime

from app.enums.player_role import PlayerRole


class PlayerBase(BaseModel):
    name: str
    email: EmailStr
    phone: Optional[str] = None
    avatar_url: Optional[str] = None


class PlayerCreate(PlayerBase):
    password: str


class PlayerInDB(PlayerBase):
    id: int
    role: PlayerRole = PlayerRole.PLAYER
    is_active: bool = True
    created_at: datetime

    class Config:
        from_attributes = True


class PlayerResponse(PlayerInDB):
    pass


class PlayerSummary(BaseModel):
    id: int
    name: str
    avatar_url: Optional[str] = None

    class Config:
        from_attributes = True


class PlayerRoleUpdate(BaseModel):
    role: PlayerRole


class PlayerChangePassword(BaseModel):
    current_password: str
    new_password: str


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
