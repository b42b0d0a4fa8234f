"""
Utilidades para validar horarios del club.
Los partidos duran 1.5 horas, por lo que la grilla de franjas del club va de
09:00 a 21:00 cada 90 minutos.
"""

from datetime import date
from typing import Iterable, List

from app.exceptions import ValidationError

SLOT_GRID = [
    "09:00",
    "10:30",
    "12:00",
    "13:30",
    "15:00",
    "16:30",
    "18:00",
    "19:30",
    "21:00",
]

# Lunes a viernes abre toda la grilla, fines de semana solo de mañana/tarde
DEFAULT_OPENING_HOURS = {
    0: SLOT_GRID[:6],
    1: list(SLOT_GRID),
    2: list(SLOT_GRID),
    3: list(SLOT_GRID),
    4: list(SLOT_GRID),
    5: list(SLOT_GRID),
    6: SLOT_GRID[:6],
}


def parse_time_to_minutes(time_str: str) -> int:
    """
    Convierte un string de tiempo (HH:MM) a minutos desde medianoche.

    Returns:
        int: Minutos desde medianoche (0-1439), o -1 si el formato es inválido
    """
    try:
        parts = time_str.split(":")
        if len(parts) != 2 or len(parts[0]) != 2 or len(parts[1]) != 2:
            return -1
        hours = int(parts[0])
        minutes = int(parts[1])
    except (ValueError, AttributeError):
        return -1
    if not (0 <= hours < 24 and 0 <= minutes < 60):
        return -1
    return hours * 60 + minutes


def validate_slot_time(time_str: str) -> str:
    """Valida que la hora tenga formato HH:MM y caiga en la grilla del club."""
    if parse_time_to_minutes(time_str) == -1:
        raise ValidationError(f"Invalid time '{time_str}', expected HH:MM")
    if time_str not in SLOT_GRID:
        raise ValidationError(
            f"Time '{time_str}' is not a slot start time ({', '.join(SLOT_GRID)})"
        )
    return time_str


def day_of_week(target_date: date) -> int:
    """Día de la semana con el domingo como 0, igual que el calendario del club."""
    return (target_date.weekday() + 1) % 7


def sort_times(times: Iterable[str]) -> List[str]:
    return sorted(set(times), key=parse_time_to_minutes)
