"""Factory for creating the player from a class definition."""
from __future__ import annotations

from fmg.data.repositories import ClassesRepository, SpellsRepository
from fmg.domain.entities import Player
from fmg.services.errors import FactoryError


def create_player_from_class_id(
    class_id: str,
    classes_repo: ClassesRepository,
    spells_repo: SpellsRepository,
) -> Player:
    """Instantiate a player using the provided repositories."""
    try:
        class_def = classes_repo.get(class_id)
    except KeyError as exc:
        raise FactoryError(f"Class '{class_id}' not found.") from exc

    try:
        spell_def = spells_repo.get(class_def.spell_id)
    except KeyError as exc:
        raise FactoryError(f"Spell '{class_def.spell_id}' not found for class '{class_id}'.") from exc

    return Player.create(class_def.name, class_def.hp, spell_def)
