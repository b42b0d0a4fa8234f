from sqlalchemy import (
    Column,
    Integer,
    String,
    Date,
    DateTime,
    ForeignKey,
    Table,
    Enum,
    Index,
    UniqueConstraint,
    text,
)
from sqlalchemy.orm import relationship
from datetime import datetime

from app.database import Base
from app.enums.match_status import MatchStatus

MATCH_CAPACITY = 4

# La columna id conserva el orden en que los jugadores se sumaron al partido
match_players = Table(
    "match_players",
    Base.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("match_id", Integer, ForeignKey("matches.id"), nullable=False),
    Column("player_id", Integer, ForeignKey("players.id"), nullable=False),
    UniqueConstraint("match_id", "player_id", name="uq_match_player"),
    extend_existing=True,
)

match_invitations = Table(
    "match_invitations",
    Base.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("match_id", Integer, ForeignKey("matches.id"), nullable=False),
    Column("player_id", Integer, ForeignKey("players.id"), nullable=False),
    UniqueConstraint("match_id", "player_id", name="uq_match_invitation"),
    extend_existing=True,
)

_ACTIVE_SLOT_FILTER = text("status != 'CANCELLED'")


class Match(Base):
    __tablename__ = "matches"
    __table_args__ = (
        # Una sola reserva activa por cancha, fecha y hora
        Index(
            "uq_active_match_per_court_slot",
            "court_id",
            "date",
            "time",
            unique=True,
            postgresql_where=_ACTIVE_SLOT_FILTER,
            sqlite_where=_ACTIVE_SLOT_FILTER,
        ),
        {"extend_existing": True},
    )

    id = Column(Integer, primary_key=True, index=True)
    court_id = Column(Integer, ForeignKey("courts.id"), nullable=False)
    date = Column(Date, nullable=False, index=True)
    time = Column(String(5), nullable=False)  # Formato "HH:MM"
    capacity = Column(Integer, nullable=False, default=MATCH_CAPACITY)
    status = Column(Enum(MatchStatus), nullable=False, default=MatchStatus.ORGANIZING)
    organizer_id = Column(Integer, ForeignKey("players.id"), nullable=True)
    booked_by_id = Column(Integer, ForeignKey("players.id"), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    court = relationship("app.models.court.Court", back_populates="matches")
    organizer = relationship("app.models.player.Player", foreign_keys=[organizer_id])
    booked_by = relationship("app.models.player.Player", foreign_keys=[booked_by_id])
    players = relationship(
        "app.models.player.Player",
        secondary=match_players,
        order_by=match_players.c.id,
    )
    invited_players = relationship(
        "app.models.player.Player",
        secondary=match_invitations,
        order_by=match_invitations.c.id,
    )

    @property
    def player_ids(self):
        return [player.id for player in self.players]

    @property
    def invited_player_ids(self):
        return [player.id for player in self.invited_players]

    @property
    def is_full(self) -> bool:
        return len(self.players) >= self.capacity
