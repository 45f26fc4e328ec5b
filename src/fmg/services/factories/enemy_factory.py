"""Factory for creating opponents from definitions."""
from __future__ import annotations

import logging

from fmg.core.rng import RNG
from fmg.data.repositories import EnemiesRepository
from fmg.domain.defs import EnemyDef
from fmg.domain.entities import Boss, Enemy
from fmg.services.errors import FactoryError

logger = logging.getLogger(__name__)


def create_enemy(enemies_repo: EnemiesRepository, rng: RNG) -> Enemy:
    """Spawn an enemy chosen uniformly from the non-boss roster."""
    roster = enemies_repo.roster()
    if not roster:
        raise FactoryError("Enemy roster is empty.")
    enemy_def = rng.choice(roster)
    logger.debug("Spawning roster enemy '%s'", enemy_def.id)
    return create_enemy_from_def(enemy_def)


def create_enemy_from_def(enemy_def: EnemyDef) -> Enemy:
    """Instantiate a standard enemy from its definition."""
    if enemy_def.boss:
        raise FactoryError(f"Enemy '{enemy_def.id}' is a boss and cannot be spawned as a roster enemy.")
    return Enemy.create(enemy_def.name, enemy_def.hp, enemy_def.attack_power)


def create_boss(boss_id: str, enemies_repo: EnemiesRepository) -> Boss:
    """Instantiate the boss with the given definition id."""
    try:
        enemy_def = enemies_repo.get(boss_id)
    except KeyError as exc:
        raise FactoryError(f"Boss '{boss_id}' not found.") from exc
    if not enemy_def.boss:
        raise FactoryError(f"Enemy '{boss_id}' is not a boss.")
    logger.debug("Spawning boss '%s'", enemy_def.id)
    return Boss.create(enemy_def.name, enemy_def.hp, enemy_def.attack_power)
