"""Shared CLI rendering helpers."""
from __future__ import annotations

from typing import Iterable, List

from fmg.domain.events import (
    AttackResolvedEvent,
    CombatantDefeatedEvent,
    CombatEvent,
    EncounterStartedEvent,
    EncounterSurvivedEvent,
    FledEvent,
    FleeBlockedEvent,
    GameOverEvent,
    GaveUpEvent,
    HitPointsGainedEvent,
    InvalidCommandEvent,
    LevelUpEvent,
    SpellCastEvent,
    SpellFailedEvent,
    SpellHitEvent,
    SurrenderedEvent,
    TurnPromptEvent,
)

WELCOME_MESSAGE = "Welcome to the Fantasy Mage Game!"
COMMAND_PROMPT = "Do you want to Cast Spell (c), Flee (f), or Give Up (g)?"


def format_event(event: CombatEvent) -> List[str]:
    """Return the narration lines for a single event."""
    if isinstance(event, EncounterStartedEvent):
        return [
            f"You are a {event.player_name} with {event.player_hp} hit points.",
            f"You encounter a wild {event.enemy_name}!",
        ]
    if isinstance(event, TurnPromptEvent):
        return [
            "",
            f"Your HP: {event.player_hp}",
            f"{event.enemy_name} HP: {event.enemy_hp}",
            COMMAND_PROMPT,
        ]
    if isinstance(event, SpellFailedEvent):
        return ["You do not have enough HP to cast the spell!"]
    if isinstance(event, SpellCastEvent):
        return [f"{event.caster_name} casts {event.spell_name} at a cost of {event.cost} HP"]
    if isinstance(event, SpellHitEvent):
        return [f"The spell hits {event.target_name} for {event.damage} damage"]
    if isinstance(event, AttackResolvedEvent):
        if event.style == "boss":
            return [f"{event.attacker_name} unleashes a powerful attack for {event.damage} damage!"]
        if event.style == "enemy":
            return [f"{event.attacker_name} attacks {event.target_name} for {event.damage} damage"]
        return [f"{event.attacker_name} deals {event.damage} damage to {event.target_name}"]
    if isinstance(event, CombatantDefeatedEvent):
        return [f"{event.combatant_name} has been defeated!"]
    if isinstance(event, FleeBlockedEvent):
        return ["You can't flee from a boss battle!"]
    if isinstance(event, FledEvent):
        return [f"You managed to flee from the {event.enemy_name}."]
    if isinstance(event, HitPointsGainedEvent):
        return [f"Gained {event.amount} hitpoint(s). Current HP: {event.hp}"]
    if isinstance(event, GaveUpEvent):
        return ["You've chosen to give up. The game will now end."]
    if isinstance(event, SurrenderedEvent):
        return ["You've decided to give up. Your journey ends here."]
    if isinstance(event, InvalidCommandEvent):
        return ["Invalid command. Please choose 'c' to Cast Spell, 'f' to Flee, or 'g' to Give Up."]
    if isinstance(event, EncounterSurvivedEvent):
        return ["After a tough battle, you've grown stronger. Preparing for the next challenge..."]
    if isinstance(event, LevelUpEvent):
        return ["Leveling up! Hit points and damage potential increased."]
    if isinstance(event, GameOverEvent):
        return ["Alas, you have been defeated in battle."]
    return [str(event)]


def format_events(events: Iterable[CombatEvent]) -> List[str]:
    lines: List[str] = []
    for event in events:
        lines.extend(format_event(event))
    return lines


def render_events(events: Iterable[CombatEvent]) -> None:
    """Print every event's narration lines."""
    for line in format_events(events):
        print(line)
