"""Encounter service handling spawning and combat resolution."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Literal, Tuple

from fmg.core.rng import RNG
from fmg.data.repositories import EnemiesRepository
from fmg.domain.entities import Enemy, Player
from fmg.domain.events import (
    CombatEvent,
    EncounterStartedEvent,
    EncounterSurvivedEvent,
    FledEvent,
    FleeBlockedEvent,
    GaveUpEvent,
    SpellFailedEvent,
    TurnPromptEvent,
)
from fmg.domain.rules import DEFAULT_RULES, GameRules
from fmg.services.factories import create_boss, create_enemy

logger = logging.getLogger(__name__)

EncounterOutcome = Literal["victory", "defeat", "fled", "surrendered"]


@dataclass(slots=True)
class Encounter:
    """Tracks one fight against a single opponent."""

    opponent: Enemy
    is_boss_battle: bool
    is_over: bool = False
    outcome: EncounterOutcome | None = None


class EncounterService:
    """Spawns opponents and resolves player commands against them."""

    def __init__(self, enemies_repo: EnemiesRepository, rules: GameRules = DEFAULT_RULES) -> None:
        self._enemies_repo = enemies_repo
        self._rules = rules

    @property
    def rules(self) -> GameRules:
        return self._rules

    # -----------------------
    # Encounter Lifecycle
    # -----------------------
    def start_encounter(self, player: Player, rng: RNG) -> Tuple[Encounter, List[CombatEvent]]:
        """Roll for a boss, otherwise spawn a roster enemy."""
        if rng.randint(0, self._rules.boss_chance_denominator - 1) == 0:
            opponent: Enemy = create_boss(self._rules.boss_id, self._enemies_repo)
            is_boss_battle = True
        else:
            opponent = create_enemy(self._enemies_repo, rng)
            is_boss_battle = False
        logger.debug("Encounter started against %s (boss=%s)", opponent.title, is_boss_battle)

        encounter = Encounter(opponent=opponent, is_boss_battle=is_boss_battle)
        events: List[CombatEvent] = [
            EncounterStartedEvent(
                player_name=player.title,
                player_hp=player.hit_points,
                enemy_name=opponent.title,
                is_boss=is_boss_battle,
            )
        ]
        return encounter, events

    def turn_prompt(self, encounter: Encounter, player: Player) -> TurnPromptEvent:
        return TurnPromptEvent(
            player_hp=player.hit_points,
            enemy_name=encounter.opponent.title,
            enemy_hp=encounter.opponent.hit_points,
        )

    def resolve_encounter(self, encounter: Encounter, player: Player) -> List[CombatEvent]:
        """Level the player up if they walked away from the encounter alive."""
        if not player.is_alive():
            return []
        logger.info("%s survived the encounter with %s (%s)", player.title, encounter.opponent.title, encounter.outcome)
        events: List[CombatEvent] = [EncounterSurvivedEvent(player_name=player.title)]
        events.extend(player.level_up(self._rules.level_up_hp))
        return events

    # -----------------------
    # Player Commands
    # -----------------------
    def cast_spell(self, encounter: Encounter, player: Player, rng: RNG) -> List[CombatEvent]:
        """Cast the player's spell; a surviving opponent strikes back."""
        opponent = encounter.opponent
        events = player.cast_spell(opponent, rng)
        if any(isinstance(event, SpellFailedEvent) for event in events):
            return events
        if opponent.is_alive() and player.is_alive():
            events.extend(opponent.attack(player, rng))
        self._update_outcome(encounter, player)
        return events

    def flee(self, encounter: Encounter, player: Player) -> List[CombatEvent]:
        opponent = encounter.opponent
        if encounter.is_boss_battle or not opponent.can_flee:
            return [FleeBlockedEvent(enemy_name=opponent.title)]
        events: List[CombatEvent] = [FledEvent(enemy_name=opponent.title)]
        events.extend(player.gain_hit_points(self._rules.flee_hp_reward))
        encounter.is_over = True
        encounter.outcome = "fled"
        return events

    def give_up(self, encounter: Encounter, player: Player) -> List[CombatEvent]:
        events: List[CombatEvent] = [GaveUpEvent(player_name=player.title)]
        events.extend(player.surrender())
        encounter.is_over = True
        encounter.outcome = "surrendered"
        return events

    def _update_outcome(self, encounter: Encounter, player: Player) -> None:
        if not player.is_alive():
            encounter.is_over = True
            encounter.outcome = "defeat"
        elif not encounter.opponent.is_alive():
            encounter.is_over = True
            encounter.outcome = "victory"
