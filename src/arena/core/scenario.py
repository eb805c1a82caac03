# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/arena/core/scenario.py
from __future__ import annotations

import logging
from typing import Optional

from .gamer import Gamer, GamerState
from ..config.models import CameraSpec, EnemySpec, ScenarioConfig
from ..observers.camera import Camera
from ..observers.enemy import Enemy
from ..observers.interface import Observer


def _make_observer(spec, logger: Optional[logging.Logger]) -> Observer:
    if isinstance(spec, EnemySpec):
        return Enemy(name=spec.name, damage=spec.damage, logger=logger)
    if isinstance(spec, CameraSpec):
        return Camera(logger=logger)
    raise TypeError(f"Unsupported observer spec: {spec!r}")


def build_gamer(cfg: ScenarioConfig, logger: Optional[logging.Logger] = None) -> Gamer:
    """
    Construct the gamer and register observers in the order the scenario lists them.
    """
    gamer = Gamer(cfg.gamer.name, health=cfg.gamer.health)
    for spec in cfg.observers:
        gamer.add_observer(_make_observer(spec, logger))
    return gamer


def run_scenario(cfg: ScenarioConfig, logger: Optional[logging.Logger] = None) -> GamerState:
    gamer = build_gamer(cfg, logger=logger)
    gamer.notify_observers()
    return gamer.state()
