"""Spell definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SpellDef:
    """Immutable description of a castable spell."""

    id: str
    name: str
    min_damage: int
    max_damage: int
    cost: int

    def __post_init__(self) -> None:
        if self.min_damage > self.max_damage:
            raise ValueError(
                f"Spell '{self.id}' min_damage ({self.min_damage}) exceeds max_damage ({self.max_damage})."
            )
        if self.cost < 0:
            raise ValueError(f"Spell '{self.id}' cost must be non-negative.")
