"""Opponent models: roster enemies and bosses."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from fmg.core.rng import RNG
from fmg.core.types import AttackStyle

from .character import Character
from .damage_profile import BOSS_PROFILE, enemy_profile
from .vitals import Vitals

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Enemy(Character):
    """Standard opponent whose attack roll is bounded by attack_power."""

    attack_power: int

    attack_style: ClassVar[AttackStyle] = "enemy"
    can_flee: ClassVar[bool] = True

    @classmethod
    def create(cls, title: str, hp: int, attack_power: int) -> Enemy:
        return cls(vitals=Vitals(title=title, hp=hp), profile=enemy_profile(attack_power), attack_power=attack_power)

    def defend(self, rng: RNG) -> int:
        defense = self.profile.roll_defend(rng)
        logger.info("%s defends and mitigates %d damage", self.title, defense)
        return defense


@dataclass(slots=True)
class Boss(Enemy):
    """Stronger opponent with fixed roll ranges that cannot be fled from."""

    attack_style: ClassVar[AttackStyle] = "boss"
    can_flee: ClassVar[bool] = False

    @classmethod
    def create(cls, title: str, hp: int, attack_power: int) -> Boss:
        return cls(vitals=Vitals(title=title, hp=hp), profile=BOSS_PROFILE, attack_power=attack_power)

    def defend(self, rng: RNG) -> int:
        return self.profile.roll_defend(rng)
