"""
Locks en proceso por clave (partido, franja de cancha o jugador).

Serializan las operaciones que leen y luego escriben el mismo partido o la
misma franja; el bloqueo de filas y las restricciones únicas de la base
cubren el caso multi-proceso.

Orden de adquisición: primero el lock del partido o de la franja, después
el del jugador. Nunca se toma un lock de partido o franja teniendo el de un
jugador.
"""

import threading
from contextlib import contextmanager
from datetime import date
from typing import Dict, Hashable, List

_REGISTRY_LOCK = threading.Lock()
# clave -> [lock, cantidad de hilos que lo usan o esperan]
_LOCKS: Dict[Hashable, List] = {}


@contextmanager
def keyed_lock(key: Hashable):
    with _REGISTRY_LOCK:
        entry = _LOCKS.get(key)
        if entry is None:
            entry = [threading.Lock(), 0]
            _LOCKS[key] = entry
        entry[1] += 1

    lock = entry[0]
    try:
        with lock:
            yield
    finally:
        with _REGISTRY_LOCK:
            entry[1] -= 1
            if entry[1] == 0:
                del _LOCKS[key]


def match_lock(match_id: int):
    return keyed_lock(("match", match_id))


def slot_lock(court_id: int, target_date: date, time: str):
    return keyed_lock(("slot", court_id, target_date.isoformat(), time))


def player_lock(player_id: int):
    return keyed_lock(("player", player_id))
