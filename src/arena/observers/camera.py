# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/arena/observers/camera.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Optional

from .interface import Subject


@dataclass(frozen=True, eq=False)
class Camera:
    """Passive observer: watches the subject and never touches it."""

    logger: Optional[logging.Logger] = field(default=None, repr=False)

    def update(self, subject: Subject) -> None:
        log = self.logger or logging.getLogger("arena.observers")
        log.info("Camera is just watching.")
