"""Enemies repository."""
from __future__ import annotations

from typing import Dict, List

from fmg.data.errors import DataValidationError
from fmg.data.repositories.base import RepositoryBase
from fmg.domain.defs import EnemyDef


class EnemiesRepository(RepositoryBase[EnemyDef]):
    """Loads and validates enemy and boss definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("enemies.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, EnemyDef]:
        enemies: Dict[str, EnemyDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Enemy IDs must be strings.")
            enemy_data = self._require_mapping(payload, f"enemy '{raw_id}'")
            self._assert_exact_fields(
                enemy_data,
                {"name", "hp", "attack_power"},
                f"enemy '{raw_id}'",
                optional_fields={"boss"},
            )
            enemies[raw_id] = EnemyDef(
                id=raw_id,
                name=self._require_str(enemy_data["name"], f"enemy '{raw_id}' name"),
                hp=self._require_int(enemy_data["hp"], f"enemy '{raw_id}' hp", minimum=1),
                attack_power=self._require_int(
                    enemy_data["attack_power"], f"enemy '{raw_id}' attack_power", minimum=1
                ),
                boss=self._require_bool(enemy_data.get("boss", False), f"enemy '{raw_id}' boss"),
            )
        return enemies

    def roster(self) -> List[EnemyDef]:
        """Return the non-boss enemies in definition order."""
        self._ensure_loaded()
        assert self._definitions is not None
        return [enemy for enemy in self._definitions.values() if not enemy.boss]
