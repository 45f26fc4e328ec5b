"""Combat and session events emitted by the domain and service layers."""
from __future__ import annotations

from dataclasses import dataclass

from fmg.core.types import AttackStyle


@dataclass(slots=True)
class CombatEvent:
    """Base combat event."""


@dataclass(slots=True)
class EncounterStartedEvent(CombatEvent):
    player_name: str
    player_hp: int
    enemy_name: str
    is_boss: bool


@dataclass(slots=True)
class TurnPromptEvent(CombatEvent):
    player_hp: int
    enemy_name: str
    enemy_hp: int


@dataclass(slots=True)
class SpellCastEvent(CombatEvent):
    caster_name: str
    spell_name: str
    cost: int
    caster_hp: int


@dataclass(slots=True)
class SpellHitEvent(CombatEvent):
    spell_name: str
    target_name: str
    damage: int
    target_hp: int


@dataclass(slots=True)
class SpellFailedEvent(CombatEvent):
    caster_name: str
    spell_name: str
    cost: int
    caster_hp: int


@dataclass(slots=True)
class AttackResolvedEvent(CombatEvent):
    attacker_name: str
    target_name: str
    damage: int
    target_hp: int
    style: AttackStyle = "basic"


@dataclass(slots=True)
class CombatantDefeatedEvent(CombatEvent):
    combatant_name: str


@dataclass(slots=True)
class FleeBlockedEvent(CombatEvent):
    enemy_name: str


@dataclass(slots=True)
class FledEvent(CombatEvent):
    enemy_name: str


@dataclass(slots=True)
class HitPointsGainedEvent(CombatEvent):
    amount: int
    hp: int


@dataclass(slots=True)
class GaveUpEvent(CombatEvent):
    player_name: str


@dataclass(slots=True)
class SurrenderedEvent(CombatEvent):
    player_name: str


@dataclass(slots=True)
class InvalidCommandEvent(CombatEvent):
    raw: str


@dataclass(slots=True)
class EncounterSurvivedEvent(CombatEvent):
    player_name: str


@dataclass(slots=True)
class LevelUpEvent(CombatEvent):
    amount: int
    hp: int


@dataclass(slots=True)
class GameOverEvent(CombatEvent):
    player_name: str
