"""Player class definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ClassDef:
    """Starting template for the player character."""

    id: str
    name: str
    hp: int
    spell_id: str
