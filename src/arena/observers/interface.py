# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations
from typing import Protocol, Tuple


class Observer(Protocol):
    def update(self, subject: "Subject") -> None: ...


class Subject(Protocol):
    def add_observer(self, observer: Observer) -> None: ...
    def remove_observer(self, observer: Observer) -> None: ...
    def notify_observers(self) -> None: ...


class Damageable(Subject, Protocol):
    """A subject that active observers can hurt."""

    def take_damage(self, amount: int) -> None: ...


def describe(observers: Tuple[Observer, ...]) -> list[str]:
    return [repr(ob) for ob in observers]
