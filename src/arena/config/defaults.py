from __future__ import annotations

from .models import CameraSpec, EnemySpec, GamerSpec, ScenarioConfig


DEFAULT_ENEMIES = [
    ("Enemy 1", 1),
    ("Enemy 2", 2),
    ("Enemy 3", 3),
]


def default_scenario() -> ScenarioConfig:
    """Three enemies dealing 1, 2 and 3 damage, followed by one camera."""
    observers = [EnemySpec(name=name, damage=dmg) for name, dmg in DEFAULT_ENEMIES]
    observers.append(CameraSpec())
    return ScenarioConfig(gamer=GamerSpec(name="Player"), observers=observers)
