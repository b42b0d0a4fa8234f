from sqlalchemy import Column, Integer, String, Date, ForeignKey, UniqueConstraint
from app.database import Base


class PlayerSlot(Base):
    """
    Ocupación de un jugador en una fecha y hora.
    Una fila por jugador en el plantel (o que reservó) de un partido activo;
    la restricción única impide estar en dos canchas a la vez.
    """

    __tablename__ = "player_slots"
    __table_args__ = (
        UniqueConstraint("player_id", "date", "time", name="uq_player_slot"),
        {"extend_existing": True},
    )

    id = Column(Integer, primary_key=True, index=True)
    player_id = Column(Integer, ForeignKey("players.id"), nullable=False)
    match_id = Column(Integer, ForeignKey("matches.id"), nullable=False, index=True)
    date = Column(Date, nullable=False)
    time = Column(String(5), nullable=False)
