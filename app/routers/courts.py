from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List, Optional

from app.database import get_db
from app.crud import court as crud
from app.schemas.court import CourtResponse, CourtCreate, CourtUpdate
from app.services.auth import require_admin
from app.models.player import Player

router = APIRouter()


@router.post("/", response_model=CourtResponse)
def create_court(
    court: CourtCreate,
    db: Session = Depends(get_db),
    current_user: Player = Depends(require_admin),
):
    return crud.create_court(db=db, court=court)


@router.get("/", response_model=List[CourtResponse])
def read_courts(
    skip: int = 0,
    limit: int = 100,
    is_indoor: Optional[bool] = None,
    db: Session = Depends(get_db),
):
    return crud.get_courts(db, skip=skip, limit=limit, is_indoor=is_indoor)


@router.get("/{court_id}", response_model=CourtResponse)
def read_court(court_id: int, db: Session = Depends(get_db)):
    db_court = crud.get_court(db, court_id=court_id)
    if db_court is None:
        raise HTTPException(status_code=404, detail="Court not found")
    return db_court


@router.put("/{court_id}", response_model=CourtResponse)
def update_court(
    court_id: int,
    court: CourtUpdate,
    db: Session = Depends(get_db),
    current_user: Player = Depends(require_admin),
):
    # NotFound se traduce a 404 en el handler global
    return crud.update_court(db=db, court_id=court_id, court=court)
