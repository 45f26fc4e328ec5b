"""Runtime entity exports."""

from .character import Character
from .damage_profile import BASE_PROFILE, BOSS_PROFILE, DamageProfile, enemy_profile
from .enemy import Boss, Enemy
from .player import Player
from .vitals import Vitals

__all__ = [
    "BASE_PROFILE",
    "BOSS_PROFILE",
    "Boss",
    "Character",
    "DamageProfile",
    "Enemy",
    "Player",
    "Vitals",
    "enemy_profile",
]
