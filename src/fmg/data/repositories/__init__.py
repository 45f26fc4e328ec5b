"""Repository exports."""

from .classes_repo import ClassesRepository
from .enemies_repo import EnemiesRepository
from .spells_repo import SpellsRepository

__all__ = [
    "ClassesRepository",
    "EnemiesRepository",
    "SpellsRepository",
]
