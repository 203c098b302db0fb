"""The engine core: level registry, frame loop and lifetime hooks."""

from __future__ import annotations

import itertools
from typing import Callable, TypeVar

from .errors import EngineError
from .gui import EngineGUI
from .objects import EngineLevel
from .text import to_upper
from .timer import EngineTime

LevelT = TypeVar("LevelT", bound=EngineLevel)


class LevelError(EngineError):
    """A level is missing, duplicated or not selected."""


class EngineCore:
    """Owns the levels, the GUI and the frame timer."""

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self.gui = EngineGUI()
        self.time = EngineTime(clock)
        self._levels: dict[str, EngineLevel] = {}
        self._current: EngineLevel | None = None

    def create_level(self, level_type: type[LevelT], name: str = "") -> LevelT:
        """Create and begin a level; its name defaults to the type name, case-insensitive."""
        key = to_upper(name or level_type.__name__)
        if key in self._levels:
            raise LevelError(f"a level named {key!r} already exists")
        level = level_type(self.gui)
        level.name = key
        self._levels[key] = level
        level.begin()
        return level

    def change_level(self, name: str) -> None:
        key = to_upper(name)
        try:
            self._current = self._levels[key]
        except KeyError:
            raise LevelError(f"no level named {key!r}") from None

    def current_level(self) -> EngineLevel | None:
        return self._current

    def tick(self) -> float:
        """Run one frame of the current level and return its delta time."""
        delta_time = self.time.time_check()
        level = self._current
        if level is None:
            raise LevelError("no current level")
        level.tick(delta_time)
        level.actor_update(delta_time)
        level.actor_release()
        return delta_time

    def run(
        self,
        begin: Callable[[EngineCore], None] | None = None,
        end: Callable[[EngineCore], None] | None = None,
        frames: int | None = 1,
    ) -> int:
        """Call begin, tick frames times (forever if None), then end; return frames run."""
        count = 0
        if begin is not None:
            begin(self)
        try:
            steps = itertools.count() if frames is None else range(frames)
            for _ in steps:
                self.tick()
                count += 1
        finally:
            if end is not None:
                end(self)
        return count