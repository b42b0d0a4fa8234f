from sqlalchemy import (
    Column,
    Integer,
    String,
    Date,
    DateTime,
    ForeignKey,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from datetime import datetime

from app.database import Base


class TimeSlotRequest(Base):
    __tablename__ = "time_slot_requests"
    __table_args__ = (
        UniqueConstraint(
            "player_id", "date", "time", name="uq_time_slot_request_player_slot"
        ),
        {"extend_existing": True},
    )

    id = Column(Integer, primary_key=True, index=True)
    player_id = Column(Integer, ForeignKey("players.id"), nullable=False)
    date = Column(Date, nullable=False, index=True)
    time = Column(String(5), nullable=False)  # Formato "HH:MM"
    created_at = Column(DateTime, default=datetime.utcnow)

    player = relationship("app.models.player.Player")
