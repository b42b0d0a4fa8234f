from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from app.exceptions import NotFound
from app.models.court import Court
from app.schemas.court import CourtCreate, CourtUpdate

logger = logging.getLogger(__name__)


def get_court(db: Session, court_id: int) -> Optional[Court]:
    return db.query(Court).filter(Court.id == court_id).first()


def get_courts(
    db: Session,
    skip: int = 0,
    limit: int = 100,
    is_indoor: Optional[bool] = None,
) -> List[Court]:
    """Canchas en el orden en que se muestran en la grilla (por id)."""
    query = db.query(Court)
    if is_indoor is not None:
        query = query.filter(Court.is_indoor == is_indoor)
    return query.order_by(Court.id).offset(skip).limit(limit).all()


def create_court(db: Session, court: CourtCreate) -> Court:
    data = court.model_dump()
    data["name"] = data["name"].strip()
    db_court = Court(**data)
    db.add(db_court)
    db.commit()
    db.refresh(db_court)
    logger.info(f"Court {db_court.id} created: {db_court.name}")
    return db_court


def update_court(db: Session, court_id: int, court: CourtUpdate) -> Court:
    db_court = get_court(db, court_id)
    if not db_court:
        raise NotFound(f"Court {court_id} not found")

    changes = court.model_dump(exclude_unset=True)
    if changes.get("name") is not None:
        changes["name"] = changes["name"].strip()
    for field, value in changes.items():
        setattr(db_court, field, value)
    db.commit()
    db.refresh(db_court)

    if changes:
        logger.info(f"Court {court_id} updated: {', '.join(sorted(changes))}")
    return db_court
