from enum import Enum


class PlayerRole(str, Enum):
    """Roles de un usuario del club"""

    ADMIN = "admin"
    PLAYER = "player"
