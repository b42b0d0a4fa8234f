from sqlalchemy.orm import Session
from typing import Iterable, List, Optional
import logging

from app.enums.player_role import PlayerRole
from app.models.player import Player

logger = logging.getLogger(__name__)


def get_player(db: Session, player_id: int) -> Optional[Player]:
    return db.query(Player).filter(Player.id == player_id).first()


def get_player_by_email(db: Session, email: str) -> Optional[Player]:
    return db.query(Player).filter(Player.email == email).first()


def get_players(db: Session, skip: int = 0, limit: int = 100) -> List[Player]:
    return db.query(Player).order_by(Player.name).offset(skip).limit(limit).all()


def get_players_by_ids(db: Session, player_ids: Iterable[int]) -> List[Player]:
    ids = list(dict.fromkeys(player_ids))
    if not ids:
        return []
    players = db.query(Player).filter(Player.id.in_(ids)).all()
    by_id = {player.id: player for player in players}
    # Respetar el orden pedido
    return [by_id[player_id] for player_id in ids if player_id in by_id]


def create_player(
    db: Session,
    name: str,
    email: str,
    hashed_password: str,
    phone: Optional[str] = None,
    avatar_url: Optional[str] = None,
    role: PlayerRole = PlayerRole.PLAYER,
) -> Player:
    db_player = Player(
        name=name,
        email=email,
        phone=phone,
        avatar_url=avatar_url,
        hashed_password=hashed_password,
        role=role,
    )
    db.add(db_player)
    db.commit()
    db.refresh(db_player)
    logger.info(f"Player created: {db_player.id} ({db_player.email})")
    return db_player


def set_player_role(db: Session, player_id: int, role: PlayerRole) -> Optional[Player]:
    db_player = get_player(db, player_id)
    if not db_player:
        return None

    db_player.role = role
    db.commit()
    db.refresh(db_player)
    logger.info(f"Player {player_id} role set to {role.value}")
    return db_player
