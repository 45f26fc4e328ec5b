"""UI-agnostic session controller driving the encounter state machine."""
from __future__ import annotations

import logging
from typing import List

from fmg.core.rng import RNG
from fmg.core.types import Command, SessionPhase
from fmg.domain.entities import Player
from fmg.domain.events import CombatEvent, GameOverEvent, InvalidCommandEvent
from fmg.services.encounter_service import Encounter, EncounterService
from fmg.services.errors import SessionError

logger = logging.getLogger(__name__)

_COMMANDS: dict[str, Command] = {
    "c": "cast",
    "f": "flee",
    "g": "give_up",
}


def parse_command(raw: str) -> Command | None:
    """Map one input line to a command, ignoring case and surrounding whitespace."""
    return _COMMANDS.get(raw.strip().lower())


class GameSession:
    """
    Holds the player, the current encounter and the session phase.

    The session is driven one input line at a time. Every call returns the
    events produced, in order, and never prints or prompts.

    Phases:
    - encounter_start: before start() or between encounters
    - combat: waiting for the next command
    - resolution: the encounter ended and the player is being levelled
    - game_over: the player is no longer alive; no further input is accepted
    """

    def __init__(self, encounter_service: EncounterService, player: Player, rng: RNG) -> None:
        self._service = encounter_service
        self._player = player
        self._rng = rng
        self._encounter: Encounter | None = None
        self._phase: SessionPhase = "encounter_start"
        self._started = False
        self._encounters_survived = 0

    @property
    def player(self) -> Player:
        return self._player

    @property
    def encounter(self) -> Encounter | None:
        return self._encounter

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def is_over(self) -> bool:
        return self._phase == "game_over"

    @property
    def is_boss_battle(self) -> bool:
        return self._encounter is not None and self._encounter.is_boss_battle

    @property
    def encounters_survived(self) -> int:
        return self._encounters_survived

    def start(self) -> List[CombatEvent]:
        """Spawn the first opponent and prompt for the first command."""
        if self._started:
            raise SessionError("Session has already started.")
        self._started = True
        return self._begin_encounter()

    def handle_line(self, raw: str) -> List[CombatEvent]:
        """Apply one line of player input and return the resulting events."""
        if self._phase == "game_over":
            raise SessionError("Session is over.")
        if self._phase != "combat" or self._encounter is None:
            raise SessionError("Session has not started.")

        encounter = self._encounter
        command = parse_command(raw)
        logger.debug("Handling input %r as %s", raw, command)
        if command is None:
            events: List[CombatEvent] = [InvalidCommandEvent(raw=raw)]
        elif command == "cast":
            events = self._service.cast_spell(encounter, self._player, self._rng)
        elif command == "flee":
            events = self._service.flee(encounter, self._player)
        else:
            events = self._service.give_up(encounter, self._player)

        if encounter.is_over:
            events.extend(self._finish_encounter(encounter))
        else:
            events.append(self._service.turn_prompt(encounter, self._player))
        return events

    def _begin_encounter(self) -> List[CombatEvent]:
        encounter, events = self._service.start_encounter(self._player, self._rng)
        self._encounter = encounter
        self._phase = "combat"
        events.append(self._service.turn_prompt(encounter, self._player))
        return events

    def _finish_encounter(self, encounter: Encounter) -> List[CombatEvent]:
        self._phase = "resolution"
        events = self._service.resolve_encounter(encounter, self._player)
        self._encounter = None
        if self._player.is_alive():
            self._encounters_survived += 1
            events.extend(self._begin_encounter())
            return events
        self._phase = "game_over"
        logger.info("Game over after %d encounter(s)", self._encounters_survived)
        events.append(GameOverEvent(player_name=self._player.title))
        return events
