from sqlalchemy.orm import Session
from typing import Dict, List, Mapping
import logging

from app.exceptions import ValidationError
from app.models.opening_hours import OpeningHour
from app.utils.slot_times import validate_slot_time, sort_times

logger = logging.getLogger(__name__)

DAYS_OF_WEEK = range(7)


def get_opening_hours(db: Session) -> Dict[int, List[str]]:
    """Devuelve el mapa completo día -> horas ordenadas (días cerrados con lista vacía)."""
    hours: Dict[int, List[str]] = {day: [] for day in DAYS_OF_WEEK}
    for row in db.query(OpeningHour).all():
        hours.setdefault(row.day_of_week, []).append(row.time)
    return {day: sort_times(times) for day, times in hours.items()}


def get_slot_times_for_day(db: Session, day_of_week: int) -> List[str]:
    rows = db.query(OpeningHour).filter(OpeningHour.day_of_week == day_of_week).all()
    return sort_times(row.time for row in rows)


def _parse_day_key(key) -> int:
    if isinstance(key, bool):
        raise ValidationError(f"Invalid day key {key!r}, expected 0-6")
    if isinstance(key, int):
        day = key
    elif isinstance(key, str) and key.strip().isdigit():
        day = int(key.strip())
    else:
        raise ValidationError(f"Invalid day key {key!r}, expected 0-6")
    if day not in DAYS_OF_WEEK:
        raise ValidationError(f"Invalid day key {key!r}, expected 0-6")
    return day


def normalize_opening_hours(hours: Mapping) -> Dict[int, List[str]]:
    normalized: Dict[int, List[str]] = {}
    for key, times in hours.items():
        day = _parse_day_key(key)
        if day in normalized:
            raise ValidationError(f"Day {day} given more than once")
        if not isinstance(times, (list, tuple, set)):
            raise ValidationError(f"Times for day {day} must be a list")
        normalized[day] = sort_times(validate_slot_time(time) for time in times)
    return normalized


def update_opening_hours(db: Session, hours: Mapping) -> Dict[int, List[str]]:
    """
    Reemplaza todos los horarios del club.
    Los días que no vienen en el payload quedan cerrados.
    """
    normalized = normalize_opening_hours(hours)

    db.query(OpeningHour).delete()
    for day, times in normalized.items():
        for time in times:
            db.add(OpeningHour(day_of_week=day, time=time))
    db.commit()

    logger.info(
        "Opening hours updated: "
        + ", ".join(f"{day}={len(times)}" for day, times in sorted(normalized.items()))
    )
    return get_opening_hours(db)
