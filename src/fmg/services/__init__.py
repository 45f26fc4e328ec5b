"""Service layer exports."""

from .controllers import GameSession, parse_command
from .encounter_service import Encounter, EncounterService
from .errors import FactoryError, SessionError

__all__ = [
    "Encounter",
    "EncounterService",
    "FactoryError",
    "GameSession",
    "SessionError",
    "parse_command",
]
