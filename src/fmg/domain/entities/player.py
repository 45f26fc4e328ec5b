"""Player character model."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from fmg.core.rng import RNG
from fmg.domain.defs import SpellDef
from fmg.domain.events import (
    CombatEvent,
    HitPointsGainedEvent,
    LevelUpEvent,
    SpellCastEvent,
    SpellFailedEvent,
    SpellHitEvent,
    SurrenderedEvent,
)

from .character import Character
from .damage_profile import BASE_PROFILE
from .vitals import Vitals


@dataclass(slots=True)
class Player(Character):
    """The player's mage. Offense goes exclusively through the spell."""

    spell: SpellDef

    @classmethod
    def create(cls, title: str, hp: int, spell: SpellDef) -> Player:
        return cls(vitals=Vitals(title=title, hp=hp), profile=BASE_PROFILE, spell=spell)

    def can_afford_spell(self) -> bool:
        return self.spell.cost <= self.vitals.hp

    def cast_spell(self, enemy: Character, rng: RNG) -> List[CombatEvent]:
        """
        Spend the spell's HP cost and strike the enemy.

        A spell costing more than the current hit points is refused with a
        single SpellFailedEvent and no state change.
        """
        spell = self.spell
        if not self.can_afford_spell():
            return [
                SpellFailedEvent(
                    caster_name=self.title,
                    spell_name=spell.name,
                    cost=spell.cost,
                    caster_hp=self.vitals.hp,
                )
            ]

        self.vitals.hp -= spell.cost
        events: List[CombatEvent] = [
            SpellCastEvent(
                caster_name=self.title,
                spell_name=spell.name,
                cost=spell.cost,
                caster_hp=self.vitals.hp,
            )
        ]
        damage = rng.randint(spell.min_damage, spell.max_damage)
        defeat_events = enemy.receive_damage(damage)
        events.append(
            SpellHitEvent(
                spell_name=spell.name,
                target_name=enemy.title,
                damage=damage,
                target_hp=enemy.hit_points,
            )
        )
        events.extend(defeat_events)
        return events

    def level_up(self, amount: int) -> List[CombatEvent]:
        self.vitals.hp += amount
        return [LevelUpEvent(amount=amount, hp=self.vitals.hp)]

    def gain_hit_points(self, amount: int) -> List[CombatEvent]:
        self.vitals.hp += amount
        return [HitPointsGainedEvent(amount=amount, hp=self.vitals.hp)]

    def surrender(self) -> List[CombatEvent]:
        self.vitals.alive = False
        return [SurrenderedEvent(player_name=self.title)]
