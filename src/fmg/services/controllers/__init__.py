"""UI-agnostic controllers for game flow orchestration."""
from __future__ import annotations

from .game_session import GameSession, parse_command

__all__ = [
    "GameSession",
    "parse_command",
]
