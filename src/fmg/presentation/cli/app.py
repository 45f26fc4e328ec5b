"""Console-driven UI loop for the Fantasy Mage Game."""
from __future__ import annotations

import logging
from typing import Callable

from fmg.core.rng import RNG
from fmg.data.repositories import ClassesRepository, EnemiesRepository, SpellsRepository
from fmg.domain.rules import DEFAULT_RULES, GameRules
from fmg.presentation.cli import config
from fmg.presentation.cli.render import WELCOME_MESSAGE, render_events
from fmg.services import EncounterService, GameSession
from fmg.services.factories import create_player_from_class_id

logger = logging.getLogger(__name__)

GIVE_UP_INPUT = "g"


def main() -> None:
    """Start the interactive CLI session."""
    debug = config.debug_enabled()
    _configure_logging(debug)
    seed = config.resolve_seed(config.load_config())
    print(WELCOME_MESSAGE)
    if debug:
        print(f"Game started with seed: {seed}")
    session = build_session(RNG(seed))
    try:
        run_session(session)
    except KeyboardInterrupt:
        print()
        print("Goodbye!")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )


def build_session(rng: RNG, rules: GameRules = DEFAULT_RULES, base_path=None) -> GameSession:
    """Construct a GameSession with concrete repositories."""
    spells_repo = SpellsRepository(base_path=base_path)
    classes_repo = ClassesRepository(spells_repo=spells_repo, base_path=base_path)
    enemies_repo = EnemiesRepository(base_path=base_path)
    player = create_player_from_class_id(rules.starting_class_id, classes_repo, spells_repo)
    encounter_service = EncounterService(enemies_repo, rules)
    return GameSession(encounter_service, player, rng)


def run_session(session: GameSession, read_line: Callable[[], str] | None = None) -> None:
    """Run the command loop until the session reports game over."""
    reader = read_line or _prompt_line
    render_events(session.start())
    while not session.is_over:
        render_events(session.handle_line(_read_command(reader)))


def _prompt_line() -> str:
    return input()


def _read_command(read_line: Callable[[], str]) -> str:
    try:
        return read_line()
    except EOFError:
        logger.debug("Input exhausted; treating as give up")
        return GIVE_UP_INPUT
