from pathlib import Path
import textwrap

import pytest

from arena.config.errors import ConfigError, ConfigNotFoundError
from arena.config.loader import load_config
from arena.config.models import CameraSpec, EnemySpec

def test_load_config_minimal_ok(tmp_path: Path):
    cfg_text = textwrap.dedent("""
        gamer:
          name: Hero
        observers:
          - kind: enemy
            name: Orc
            damage: 7
          - kind: camera
    """)
    f = tmp_path / "scenario.yaml"
    f.write_text(cfg_text)
    cfg = load_config(f)
    assert cfg.gamer.name == "Hero"
    assert cfg.gamer.health == 100
    assert isinstance(cfg.observers[0], EnemySpec)
    assert cfg.observers[0].damage == 7
    assert isinstance(cfg.observers[1], CameraSpec)

def test_env_vars_are_expanded(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("GAMER_NAME", "Envy")
    f = tmp_path / "scenario.yaml"
    f.write_text("gamer:\n  name: ${GAMER_NAME}\n")
    assert load_config(f).gamer.name == "Envy"

def test_empty_file_gives_empty_scenario(tmp_path: Path):
    f = tmp_path / "scenario.yaml"
    f.write_text("")
    cfg = load_config(f)
    assert cfg.observers == []
    assert cfg.gamer.name == "Player"

def test_negative_damage_rejected(tmp_path: Path):
    f = tmp_path / "scenario.yaml"
    f.write_text("observers:\n  - kind: enemy\n    name: x\n    damage: -1\n")
    with pytest.raises(ConfigError) as exc:
        load_config(f)
    assert exc.value.__cause__ is not None

def test_unknown_kind_rejected(tmp_path: Path):
    f = tmp_path / "scenario.yaml"
    f.write_text("observers:\n  - kind: dragon\n")
    with pytest.raises(ConfigError):
        load_config(f)

def test_bad_yaml_rejected(tmp_path: Path):
    f = tmp_path / "scenario.yaml"
    f.write_text("gamer: [unclosed\n")
    with pytest.raises(ConfigError):
        load_config(f)

def test_missing_file(tmp_path: Path):
    with pytest.raises(ConfigNotFoundError):
        load_config(tmp_path / "nope.yaml")

def test_shipped_default_scenario_loads():
    path = Path(__file__).resolve().parents[2] / "scenarios" / "default.yaml"
    cfg = load_config(path)
    assert [e.damage for e in cfg.enemies()] == [1, 2, 3]
    assert isinstance(cfg.observers[-1], CameraSpec)

def test_undecodable_file_rejected(tmp_path: Path):
    f = tmp_path / "scenario.yaml"
    f.write_bytes(b"gamer:\n  name: \xff\xfe\n")
    with pytest.raises(ConfigError) as exc:
        load_config(f)
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)

def test_non_ascii_names_read_as_utf8(tmp_path: Path):
    f = tmp_path / "scenario.yaml"
    f.write_bytes("gamer:\n  name: Игрок\n".encode("utf-8"))
    assert load_config(f).gamer.name == "Игрок"
