from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List

from app.database import get_db
from app.crud import player as crud
from app.schemas.player import PlayerResponse, PlayerRoleUpdate
from app.services.auth import get_current_user, require_admin
from app.models.player import Player

router = APIRouter()


@router.get("/", response_model=List[PlayerResponse])
def read_players(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    current_user: Player = Depends(get_current_user),
):
    return crud.get_players(db, skip=skip, limit=limit)


@router.get("/{player_id}", response_model=PlayerResponse)
def read_player(
    player_id: int,
    db: Session = Depends(get_db),
    current_user: Player = Depends(get_current_user),
):
    db_player = crud.get_player(db, player_id=player_id)
    if db_player is None:
        raise HTTPException(status_code=404, detail="Player not found")
    return db_player


@router.put("/{player_id}/role", response_model=PlayerResponse)
def update_player_role(
    player_id: int,
    payload: PlayerRoleUpdate,
    db: Session = Depends(get_db),
    current_user: Player = Depends(require_admin),
):
    if player_id == current_user.id:
        raise HTTPException(status_code=400, detail="Admins cannot change their own role")

    db_player = crud.set_player_role(db, player_id=player_id, role=payload.role)
    if db_player is None:
        raise HTTPException(status_code=404, detail="Player not found")
    return db_player
