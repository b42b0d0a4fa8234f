from app.models.player import Player
from app.models.court import Court
from app.models.opening_hours import OpeningHour
from app.models.time_slot_request import TimeSlotRequest
from app.models.match import Match
from app.models.player_slot import PlayerSlot

# This makes the models directory a Python package and ensures all models are loaded
