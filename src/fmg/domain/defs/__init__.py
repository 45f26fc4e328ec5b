"""Definition dataclasses loaded from JSON."""

from .class_def import ClassDef
from .enemy_def import EnemyDef
from .spell_def import SpellDef

__all__ = [
    "ClassDef",
    "EnemyDef",
    "SpellDef",
]
