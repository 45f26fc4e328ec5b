"""Factory helpers for runtime entities."""

from .enemy_factory import create_boss, create_enemy, create_enemy_from_def
from .player_factory import create_player_from_class_id

__all__ = [
    "create_boss",
    "create_enemy",
    "create_enemy_from_def",
    "create_player_from_class_id",
]
