"""
Configuración compartida para tests pytest
"""
import os

# La app nunca debe apuntar a la base real durante los tests
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_DEFAULT_DATA", "false")

from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db

# Importar todos los modelos para que SQLAlchemy pueda resolver las relaciones
from app.models.player import Player
from app.models.court import Court
from app.models.opening_hours import OpeningHour
from app.models.time_slot_request import TimeSlotRequest
from app.models.match import Match
from app.models.player_slot import PlayerSlot
from app.enums.player_role import PlayerRole
from app.services.auth import create_access_token


# Base de datos en memoria para tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Martes 10 de junio de 2025
MATCH_DAY = date(2025, 6, 10)


@pytest.fixture
def db():
    """Crear base de datos de test y limpiarla después"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


def make_player(db, name, role=PlayerRole.PLAYER):
    player = Player(
        name=name,
        email=f"{name.lower()}@padelclub.com",
        hashed_password="hashed",
        role=role,
        is_active=True,
    )
    db.add(player)
    db.commit()
    db.refresh(player)
    return player


@pytest.fixture
def admin(db):
    """Administrador del club (organiza los partidos)"""
    return make_player(db, "Admin", role=PlayerRole.ADMIN)


@pytest.fixture
def players(db):
    """Seis jugadores comunes"""
    return [make_player(db, name) for name in ("Ana", "Bruno", "Carla", "Diego", "Eva", "Fede")]


@pytest.fixture
def courts(db):
    """Dos canchas del club"""
    result = []
    for name in ("Pista Central", "Pista Norte"):
        court = Court(name=name, surface_type="hard", is_indoor=True)
        db.add(court)
        result.append(court)
    db.commit()
    for court in result:
        db.refresh(court)
    return result


@pytest.fixture
def court(courts):
    return courts[0]


@pytest.fixture
def client(db):
    """TestClient con la sesión de test inyectada"""
    from fastapi.testclient import TestClient
    from app.main import app

    def _get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = _get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def auth_headers(player):
    token = create_access_token(data={"sub": player.email})
    return {"Authorization": f"Bearer {token}"}
