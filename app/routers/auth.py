from datetime import timedelta
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session
from app.database import get_db
from app.crud import player as player_crud
from app.schemas.player import (
    PlayerCreate,
    PlayerResponse,
    PlayerChangePassword,
    Token,
)
from app.services.auth import (
    authenticate_player,
    create_access_token,
    get_password_hash,
    ACCESS_TOKEN_EXPIRE_MINUTES,
    get_current_user,
)
from app.models.player import Player

router = APIRouter()


@router.post("/register", response_model=PlayerResponse)
def register(player: PlayerCreate, db: Session = Depends(get_db)):
    if player_crud.get_player_by_email(db, player.email):
        raise HTTPException(status_code=400, detail="Email already registered")

    return player_crud.create_player(
        db,
        name=player.name,
        email=player.email,
        phone=player.phone,
        avatar_url=player.avatar_url,
        hashed_password=get_password_hash(player.password),
    )


@router.post("/token", response_model=Token)
def login(
    form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)
):
    player = authenticate_player(db, form_data.username, form_data.password)
    if not player:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    access_token_expires = timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = create_access_token(
        data={"sub": player.email}, expires_delta=access_token_expires
    )
    return {"access_token": access_token, "token_type": "bearer"}


@router.get("/me", response_model=PlayerResponse)
def read_players_me(current_user: Player = Depends(get_current_user)):
    return current_user


@router.post("/change-password", response_model=dict)
def change_password(
    password_data: PlayerChangePassword,
    current_user: Player = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Change the player's password.
    The current password must be provided for verification.
    """
    player = authenticate_player(db, current_user.email, password_data.current_password)
    if not player:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Current password is incorrect",
            headers={"WWW-Authenticate": "Bearer"},
        )

    player.hashed_password = get_password_hash(password_data.new_password)
    db.commit()

    return {"message": "Password updated successfully"}
