"""Session-wide game constants."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GameRules:
    """Tunable numbers that drive encounter flow."""

    boss_chance_denominator: int = 10
    boss_id: str = "dark_sorcerer"
    level_up_hp: int = 10
    flee_hp_reward: int = 1
    starting_class_id: str = "novice_mage"


DEFAULT_RULES = GameRules()
