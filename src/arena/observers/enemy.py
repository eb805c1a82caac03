# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/arena/observers/enemy.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Optional

from .interface import Damageable


# eq=False keeps identity equality, so two enemies with the same
# name and damage are still separate registry entries.
@dataclass(frozen=True, eq=False)
class Enemy:
    name: str
    damage: int
    logger: Optional[logging.Logger] = field(default=None, repr=False)

    def update(self, subject: Damageable) -> None:
        subject.take_damage(self.damage)

        log = self.logger or logging.getLogger("arena.observers")
        log.info(f"{self.name} dealt {self.damage} damage")
