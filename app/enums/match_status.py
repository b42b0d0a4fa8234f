from enum import Enum


class MatchStatus(str, Enum):
    ORGANIZING = "ORGANIZING"
    CONFIRMED = "CONFIRMED"
    BOOKED = "BOOKED"
    CANCELLED = "CANCELLED"


class InvitationResponse(str, Enum):
    ACCEPT = "ACCEPT"
    DECLINE = "DECLINE"


# Estados que ocupan la cancha en su franja horaria
ACTIVE_MATCH_STATUSES = (
    MatchStatus.ORGANIZING,
    MatchStatus.CONFIRMED,
    MatchStatus.BOOKED,
)
