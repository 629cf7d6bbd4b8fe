"""Shared, observable current loadout.

One PlateLoader lives on ``app.state`` and is handed to endpoints through a
dependency, so every consumer (calculator, wearable snapshot) sees the same
plates. Writes replace the whole loadout and notify subscribers.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from fastapi import Request

from barlog.core.enums import Unit
from barlog.services.plate_resolver import PlateSet

logger = logging.getLogger(__name__)

Listener = Callable[[PlateSet], None]


@dataclass(frozen=True)
class LoadoutInputs:
    """What the current loadout was computed from."""

    target_weight: float
    unit: Unit
    barbell_id: str


class PlateLoader:
    def __init__(self) -> None:
        self._plates: PlateSet = {}
        self._inputs: LoadoutInputs | None = None
        self._listeners: list[Listener] = []

    @property
    def plates(self) -> PlateSet:
        return dict(self._plates)

    @property
    def inputs(self) -> LoadoutInputs | None:
        return self._inputs

    def load(self, plates: PlateSet, inputs: LoadoutInputs | None = None) -> None:
        """Replace the current loadout (never merged with the previous one)."""
        self._plates = dict(plates)
        self._inputs = inputs
        self._notify()

    def unload(self) -> None:
        self._plates = {}
        self._inputs = None
        self._notify()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners = [fn for fn in self._listeners if fn != listener]

    def _notify(self) -> None:
        snapshot = self.plates
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Plate loader listener %r failed", listener)


def get_plate_loader(request: Request) -> PlateLoader:
    """Dependency: the application's shared PlateLoader."""
    return request.app.state.plate_loader
