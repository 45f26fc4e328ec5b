"""Enemy definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class EnemyDef:
    """Template for a roster enemy or a boss."""

    id: str
    name: str
    hp: int
    attack_power: int
    boss: bool = False
