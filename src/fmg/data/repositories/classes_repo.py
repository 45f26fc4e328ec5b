"""Classes repository with reference validation."""
from __future__ import annotations

from typing import Dict

from fmg.data.errors import DataReferenceError, DataValidationError
from fmg.data.repositories.base import RepositoryBase
from fmg.data.repositories.spells_repo import SpellsRepository
from fmg.domain.defs import ClassDef


class ClassesRepository(RepositoryBase[ClassDef]):
    """Loads player classes and ensures the referenced spell exists."""

    def __init__(self, spells_repo: SpellsRepository | None = None, base_path=None) -> None:
        super().__init__("classes.json", base_path)
        self._spells_repo = spells_repo or SpellsRepository(base_path=base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ClassDef]:
        spell_ids = {spell.id for spell in self._spells_repo.all()}

        classes: Dict[str, ClassDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Class IDs must be strings.")
            class_data = self._require_mapping(payload, f"class '{raw_id}'")
            self._assert_exact_fields(class_data, {"name", "hp", "spell_id"}, f"class '{raw_id}'")

            spell_id = self._require_str(class_data["spell_id"], f"class '{raw_id}' spell_id")
            if spell_id not in spell_ids:
                raise DataReferenceError(f"class '{raw_id}' references missing spell '{spell_id}'.")

            classes[raw_id] = ClassDef(
                id=raw_id,
                name=self._require_str(class_data["name"], f"class '{raw_id}' name"),
                hp=self._require_int(class_data["hp"], f"class '{raw_id}' hp", minimum=1),
                spell_id=spell_id,
            )
        return classes
