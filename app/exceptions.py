"""
Errores tipados del motor de partidos.

Cada error lleva el status HTTP con el que se devuelve al cliente; el
handler registrado en app.main los traduce a JSONResponse.
"""


class SchedulingError(Exception):
    status_code = 400
    kind = "scheduling_error"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFound(SchedulingError):
    status_code = 404
    kind = "not_found"


class SlotOccupied(SchedulingError):
    status_code = 409
    kind = "slot_occupied"


class MatchFull(SchedulingError):
    status_code = 409
    kind = "match_full"


class InvalidMatchState(SchedulingError):
    status_code = 409
    kind = "invalid_match_state"


class PlayerUnavailable(SchedulingError):
    status_code = 409
    kind = "player_unavailable"


class NotInvited(SchedulingError):
    status_code = 403
    kind = "not_invited"


class ValidationError(SchedulingError):
    status_code = 422
    kind = "validation_error"
