"""Per-variant damage and defense ranges."""
from __future__ import annotations

from dataclasses import dataclass

from fmg.core.rng import RNG


@dataclass(frozen=True, slots=True)
class DamageProfile:
    """Inclusive roll ranges for attacking and defending."""

    attack_min: int
    attack_max: int
    defend_min: int
    defend_max: int

    def roll_attack(self, rng: RNG) -> int:
        return rng.randint(self.attack_min, self.attack_max)

    def roll_defend(self, rng: RNG) -> int:
        return rng.randint(self.defend_min, self.defend_max)


BASE_PROFILE = DamageProfile(attack_min=1, attack_max=5, defend_min=1, defend_max=3)
BOSS_PROFILE = DamageProfile(attack_min=5, attack_max=14, defend_min=3, defend_max=7)


def enemy_profile(attack_power: int) -> DamageProfile:
    """Roll ranges for a standard enemy with the given attack power."""
    if attack_power < 1:
        raise ValueError("attack_power must be at least 1.")
    return DamageProfile(
        attack_min=1,
        attack_max=attack_power,
        defend_min=BASE_PROFILE.defend_min,
        defend_max=BASE_PROFILE.defend_max,
    )
