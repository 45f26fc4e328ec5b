"""Shared type aliases for the core and domain layers."""
from typing import Literal

Command = Literal["cast", "flee", "give_up"]
SessionPhase = Literal["encounter_start", "combat", "resolution", "game_over"]
AttackStyle = Literal["basic", "enemy", "boss"]

__all__ = ["AttackStyle", "Command", "SessionPhase"]
