# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/arena/core/gamer.py
from __future__ import annotations

import logging
from typing import List, Tuple

from pydantic import BaseModel, Field

from ..observers.interface import Observer, describe

log = logging.getLogger("arena.core")

STARTING_HEALTH = 100


class GamerState(BaseModel):
    """Point-in-time dump of a gamer, for inspection only."""

    name: str
    health: int
    observers: List[str] = Field(default_factory=list)


class Gamer:
    """
    The observed subject.

    Holds health and an ordered registry of observers. The registry keeps
    plain references; the gamer does not own its observers.
    """

    def __init__(self, name: str, health: int = STARTING_HEALTH):
        self.name = name
        self.health = health
        self._observers: List[Observer] = []

    @property
    def observers(self) -> Tuple[Observer, ...]:
        return tuple(self._observers)

    def add_observer(self, observer: Observer) -> None:
        self._observers.append(observer)
        log.debug(f"{self.name}: registered {observer!r} (total={len(self._observers)})")

    def remove_observer(self, observer: Observer) -> None:
        """
        Remove the first registered entry that *is* `observer`.
        Later duplicates stay registered; an unknown observer is a no-op.
        """
        for idx, current in enumerate(self._observers):
            if current is observer:
                del self._observers[idx]
                log.debug(f"{self.name}: removed {observer!r}")
                return

    def notify_observers(self) -> None:
        # Snapshot: registry changes made by observers apply to the next broadcast.
        snapshot = list(self._observers)
        log.debug(f"{self.name}: notifying {len(snapshot)} observer(s)")
        for ob in snapshot:
            ob.update(self)

    def take_damage(self, amount: int) -> None:
        # no floor; health may go negative
        self.health -= amount

    def state(self) -> GamerState:
        return GamerState(
            name=self.name,
            health=self.health,
            observers=describe(self.observers),
        )

    def __repr__(self) -> str:
        return f"Gamer(name={self.name!r}, health={self.health}, observers={len(self._observers)})"
