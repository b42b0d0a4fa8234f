from sqlalchemy import Column, Integer, String, UniqueConstraint

from app.database import Base


class OpeningHour(Base):
    """Una franja abierta del club: día de la semana (0 = domingo) + hora de inicio."""

    __tablename__ = "opening_hours"
    __table_args__ = (
        UniqueConstraint("day_of_week", "time", name="uq_opening_hour_day_time"),
        {"extend_existing": True},
    )

    id = Column(Integer, primary_key=True)
    day_of_week = Column(Integer, nullable=False, index=True)
    time = Column(String(5), nullable=False)  # Formato "HH:MM"
