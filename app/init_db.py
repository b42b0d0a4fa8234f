from sqlalchemy.orm import Session
from app.crud import opening_hours as opening_hours_crud
from app.enums.player_role import PlayerRole
from app.models.court import Court
from app.models.opening_hours import OpeningHour
from app.models.player import Player
from app.services.auth import get_password_hash
from app.utils.slot_times import DEFAULT_OPENING_HOURS
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_COURTS = [
    {"name": "Pista Central - Cristal", "surface_type": "hard", "is_indoor": True, "price_per_hour": 24},
    {"name": "Pista Panorámica", "surface_type": "hard", "is_indoor": True, "price_per_hour": 28},
    {"name": "Pista Outdoor 1", "surface_type": "clay", "is_indoor": False, "price_per_hour": 18},
    {"name": "Pista Norte", "surface_type": "clay", "is_indoor": False, "price_per_hour": 18},
]


def create_initial_admin(db: Session):
    """
    Crea el usuario admin inicial si la tabla de jugadores está vacía.
    """
    if db.query(Player).count() > 0:
        logger.info("Players already exist, skipping initial admin.")
        return

    email = os.getenv("INITIAL_ADMIN_EMAIL", "admin@padelclub.com")
    password = os.getenv("INITIAL_ADMIN_PASSWORD", "password.Ab")

    db_admin = Player(
        name="Admin",
        email=email,
        hashed_password=get_password_hash(password),
        role=PlayerRole.ADMIN,
        is_active=True,
    )
    db.add(db_admin)
    db.commit()
    logger.info(f"Initial admin created: {email}")


def seed_default_data(db: Session):
    """Canchas y horarios por defecto para un club recién instalado."""
    if db.query(Court).count() == 0:
        for court in DEFAULT_COURTS:
            db.add(Court(has_lighting=True, **court))
        db.commit()
        logger.info(f"Created {len(DEFAULT_COURTS)} default courts")

    if db.query(OpeningHour).count() == 0:
        opening_hours_crud.update_opening_hours(db, DEFAULT_OPENING_HOURS)
        logger.info("Default opening hours created")
