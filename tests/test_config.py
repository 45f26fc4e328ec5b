import json
from pathlib import Path

from fmg.presentation.cli import config


def test_load_config_missing_file_returns_defaults(tmp_path: Path) -> None:
    assert config.load_config(tmp_path / "missing.json") == {"seed": None}


def test_load_config_reads_seed(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"seed": 1234}), encoding="utf-8")
    assert config.load_config(path) == {"seed": 1234}


def test_load_config_ignores_malformed_content(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{broken", encoding="utf-8")
    assert config.load_config(path) == {"seed": None}

    path.write_text(json.dumps(["seed"]), encoding="utf-8")
    assert config.load_config(path) == {"seed": None}

    path.write_text(json.dumps({"seed": "abc"}), encoding="utf-8")
    assert config.load_config(path) == {"seed": None}


def test_resolve_seed_prefers_environment() -> None:
    assert config.resolve_seed({"seed": 5}, environ={"FMG_SEED": "42"}) == 42


def test_resolve_seed_falls_back_to_config() -> None:
    assert config.resolve_seed({"seed": 5}, environ={}) == 5
    assert config.resolve_seed({"seed": 5}, environ={"FMG_SEED": "not-a-number"}) == 5


def test_resolve_seed_random_when_unset() -> None:
    seed = config.resolve_seed({"seed": None}, environ={})
    assert 0 <= seed < 2**31 - 1


def test_debug_enabled_only_for_explicit_one() -> None:
    assert config.debug_enabled({"FMG_DEBUG": "1"}) is True
    assert config.debug_enabled({"FMG_DEBUG": "0"}) is False
    assert config.debug_enabled({}) is False


def test_default_config_path_under_user_dir() -> None:
    path = config.get_default_config_path()
    assert path.name == "config.json"
    assert path.parent == config.get_user_data_dir()
