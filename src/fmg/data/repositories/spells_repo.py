"""Spells repository."""
from __future__ import annotations

from typing import Dict

from fmg.data.errors import DataValidationError
from fmg.data.repositories.base import RepositoryBase
from fmg.domain.defs import SpellDef


class SpellsRepository(RepositoryBase[SpellDef]):
    """Loads castable spells."""

    def __init__(self, base_path=None) -> None:
        super().__init__("spells.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, SpellDef]:
        spells: Dict[str, SpellDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Spell IDs must be strings.")
            spell_data = self._require_mapping(payload, f"spell '{raw_id}'")
            self._assert_exact_fields(
                spell_data, {"name", "min_damage", "max_damage", "cost"}, f"spell '{raw_id}'"
            )
            try:
                spells[raw_id] = SpellDef(
                    id=raw_id,
                    name=self._require_str(spell_data["name"], f"spell '{raw_id}' name"),
                    min_damage=self._require_int(spell_data["min_damage"], f"spell '{raw_id}' min_damage"),
                    max_damage=self._require_int(spell_data["max_damage"], f"spell '{raw_id}' max_damage"),
                    cost=self._require_int(spell_data["cost"], f"spell '{raw_id}' cost"),
                )
            except ValueError as exc:
                raise DataValidationError(str(exc)) from exc
        return spells
