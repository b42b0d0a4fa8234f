from sqlalchemy import Column, Integer, String, Boolean, DateTime, Enum
from datetime import datetime

from app.database import Base
from app.enums.player_role import PlayerRole


class Player(Base):
    __tablename__ = "players"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    phone = Column(String, nullable=True)
    avatar_url = Column(String, nullable=True)
    hashed_password = Column(String)
    role = Column(Enum(PlayerRole), default=PlayerRole.PLAYER, nullable=False)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    @property
    def is_admin(self) -> bool:
        return self.role == PlayerRole.ADMIN
