import logging

import pytest

from fmg.core.rng import RNG
from fmg.domain.defs import SpellDef
from fmg.domain.entities import BASE_PROFILE, Boss, Character, Enemy, Player, Vitals, enemy_profile
from fmg.domain.events import (
    AttackResolvedEvent,
    CombatantDefeatedEvent,
    HitPointsGainedEvent,
    LevelUpEvent,
    SpellCastEvent,
    SpellFailedEvent,
    SpellHitEvent,
    SurrenderedEvent,
)
from tests.helpers.rng_stubs import MaxRNG, MinRNG

FIREBALL = SpellDef(id="fireball", name="Fireball", min_damage=2, max_damage=6, cost=2)


def _player(hp: int = 20) -> Player:
    return Player.create("Novice Mage", hp, FIREBALL)


def test_spell_def_is_immutable() -> None:
    with pytest.raises(AttributeError):
        FIREBALL.cost = 0  # type: ignore[misc]


@pytest.mark.parametrize(
    "min_damage, max_damage, cost",
    [(6, 2, 1), (1, 1, -1)],
)
def test_spell_def_rejects_invalid_bounds(min_damage: int, max_damage: int, cost: int) -> None:
    with pytest.raises(ValueError):
        SpellDef(id="bad", name="Bad", min_damage=min_damage, max_damage=max_damage, cost=cost)


def test_receive_damage_subtracts_exact_amount() -> None:
    goblin = Enemy.create("Goblin", 8, 3)

    events = goblin.receive_damage(3)

    assert goblin.hit_points == 5
    assert goblin.is_alive()
    assert events == []


def test_receive_damage_to_zero_defeats() -> None:
    goblin = Enemy.create("Goblin", 8, 3)

    events = goblin.receive_damage(8)

    assert goblin.hit_points == 0
    assert not goblin.is_alive()
    assert events == [CombatantDefeatedEvent(combatant_name="Goblin")]


def test_receive_damage_allows_negative_hp_and_stays_dead() -> None:
    troll = Enemy.create("Troll", 12, 4)

    troll.receive_damage(20)
    troll.receive_damage(1)

    assert troll.hit_points == -9
    assert not troll.is_alive()


def test_dead_character_is_not_revived_by_healing() -> None:
    player = _player(hp=2)
    player.receive_damage(5)

    player.gain_hit_points(10)

    assert player.hit_points == 7
    assert not player.is_alive()


def test_base_character_attack_range() -> None:
    fighter = Character(vitals=Vitals(title="Fighter", hp=10), profile=BASE_PROFILE)
    dummy = Enemy.create("Dummy", 100, 1)

    low = fighter.attack(dummy, MinRNG())
    high = fighter.attack(dummy, MaxRNG())

    assert low[0] == AttackResolvedEvent(
        attacker_name="Fighter", target_name="Dummy", damage=1, target_hp=99, style="basic"
    )
    assert high[0].damage == 5
    assert dummy.hit_points == 94


def test_enemy_attack_damage_bounded_by_attack_power() -> None:
    ogre = Enemy.create("Ogre", 15, 5)
    rng = RNG(3)
    for _ in range(200):
        player = _player(hp=100)
        event = ogre.attack(player, rng)[0]
        assert isinstance(event, AttackResolvedEvent)
        assert 1 <= event.damage <= 5
        assert player.hit_points == 100 - event.damage
        assert event.style == "enemy"


def test_boss_attack_damage_range() -> None:
    boss = Boss.create("Dark Sorcerer", 50, 10)
    rng = RNG(5)
    damages = set()
    for _ in range(500):
        player = _player(hp=100)
        event = boss.attack(player, rng)[0]
        damages.add(event.damage)
        assert event.style == "boss"

    assert min(damages) >= 5
    assert max(damages) <= 14


def test_attack_that_kills_emits_defeat_after_attack() -> None:
    goblin = Enemy.create("Goblin", 8, 3)
    player = _player(hp=2)

    events = goblin.attack(player, MaxRNG())

    assert [type(event) for event in events] == [AttackResolvedEvent, CombatantDefeatedEvent]
    assert events[0].target_hp == -1
    assert not player.is_alive()


def test_defend_ranges_per_variant() -> None:
    base = Character(vitals=Vitals(title="Fighter", hp=10), profile=BASE_PROFILE)
    enemy = Enemy.create("Troll", 12, 4)
    boss = Boss.create("Dark Sorcerer", 50, 10)

    assert (base.defend(MinRNG()), base.defend(MaxRNG())) == (1, 3)
    assert (enemy.defend(MinRNG()), enemy.defend(MaxRNG())) == (1, 3)
    assert (boss.defend(MinRNG()), boss.defend(MaxRNG())) == (3, 7)


def test_enemy_defend_logs_mitigation(caplog) -> None:
    enemy = Enemy.create("Troll", 12, 4)

    with caplog.at_level(logging.INFO, logger="fmg.domain.entities.enemy"):
        value = enemy.defend(MaxRNG())

    assert value == 3
    assert "Troll defends and mitigates 3 damage" in caplog.text


def test_enemy_profile_requires_positive_attack_power() -> None:
    with pytest.raises(ValueError):
        enemy_profile(0)


def test_cast_spell_spends_cost_and_damages_enemy() -> None:
    player = _player()
    goblin = Enemy.create("Goblin", 8, 3)

    events = player.cast_spell(goblin, MaxRNG())

    assert player.hit_points == 18
    assert goblin.hit_points == 2
    assert events == [
        SpellCastEvent(caster_name="Novice Mage", spell_name="Fireball", cost=2, caster_hp=18),
        SpellHitEvent(spell_name="Fireball", target_name="Goblin", damage=6, target_hp=2),
    ]


def test_cast_spell_damage_within_spell_range() -> None:
    rng = RNG(11)
    for _ in range(200):
        player = _player()
        dummy = Enemy.create("Dummy", 100, 1)
        hit = [event for event in player.cast_spell(dummy, rng) if isinstance(event, SpellHitEvent)][0]
        assert 2 <= hit.damage <= 6


def test_cast_spell_unaffordable_changes_nothing() -> None:
    player = _player(hp=1)
    goblin = Enemy.create("Goblin", 8, 3)

    events = player.cast_spell(goblin, MaxRNG())

    assert events == [SpellFailedEvent(caster_name="Novice Mage", spell_name="Fireball", cost=2, caster_hp=1)]
    assert player.hit_points == 1
    assert goblin.hit_points == 8


def test_cast_spell_costing_all_hp_keeps_player_standing() -> None:
    player = _player(hp=2)
    goblin = Enemy.create("Goblin", 8, 3)

    player.cast_spell(goblin, MinRNG())

    assert player.hit_points == 0
    assert player.is_alive()


def test_cast_spell_defeating_enemy_emits_defeat_last() -> None:
    player = _player()
    goblin = Enemy.create("Goblin", 2, 3)

    events = player.cast_spell(goblin, MinRNG())

    assert isinstance(events[-1], CombatantDefeatedEvent)
    assert events[-1].combatant_name == "Goblin"


def test_level_up_adds_hit_points() -> None:
    player = _player()

    events = player.level_up(10)

    assert player.hit_points == 30
    assert events == [LevelUpEvent(amount=10, hp=30)]


def test_gain_hit_points_reports_total() -> None:
    player = _player()

    events = player.gain_hit_points(1)

    assert events == [HitPointsGainedEvent(amount=1, hp=21)]


def test_surrender_ends_life_regardless_of_hp() -> None:
    player = _player(hp=500)

    events = player.surrender()

    assert not player.is_alive()
    assert player.hit_points == 500
    assert events == [SurrenderedEvent(player_name="Novice Mage")]
