"""Base character shared by the player and every opponent."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List

from fmg.core.rng import RNG
from fmg.core.types import AttackStyle
from fmg.domain.events import AttackResolvedEvent, CombatantDefeatedEvent, CombatEvent

from .damage_profile import DamageProfile
from .vitals import Vitals


@dataclass(slots=True)
class Character:
    """
    A combatant made of shared vitals plus a damage profile.

    Variants change behaviour through their profile and attack style rather
    than by re-implementing the damage bookkeeping.
    """

    vitals: Vitals
    profile: DamageProfile

    attack_style: ClassVar[AttackStyle] = "basic"

    @property
    def title(self) -> str:
        return self.vitals.title

    @property
    def hit_points(self) -> int:
        return self.vitals.hp

    def is_alive(self) -> bool:
        return self.vitals.alive

    def receive_damage(self, amount: int) -> List[CombatEvent]:
        """Subtract damage and flag defeat once hit points reach zero or below."""
        self.vitals.hp -= amount
        if self.vitals.hp <= 0 and self.vitals.alive:
            self.vitals.alive = False
            return [CombatantDefeatedEvent(combatant_name=self.title)]
        return []

    def attack(self, opponent: Character, rng: RNG) -> List[CombatEvent]:
        damage = self.profile.roll_attack(rng)
        defeat_events = opponent.receive_damage(damage)
        events: List[CombatEvent] = [
            AttackResolvedEvent(
                attacker_name=self.title,
                target_name=opponent.title,
                damage=damage,
                target_hp=opponent.hit_points,
                style=self.attack_style,
            )
        ]
        events.extend(defeat_events)
        return events

    def defend(self, rng: RNG) -> int:
        """Roll a defensive value. Combat resolution does not consume it."""
        return self.profile.roll_defend(rng)
