"""GUI windows registered by name and ticked every frame."""

from __future__ import annotations

from typing import Any, TypeVar

from .errors import EngineError
from .objects import EngineObject
from .text import to_upper


class GUIWindow(EngineObject):
    """A named window that draws itself each frame while it is on."""

    def __init__(self) -> None:
        super().__init__()
        self.is_on = True

    def tick(self, delta_time: float, level: Any = None) -> None:
        """Draw the window's contents for this frame."""


WindowT = TypeVar("WindowT", bound=GUIWindow)


class EngineGUI:
    """Registry of GUI windows keyed by upper-cased name."""

    def __init__(self) -> None:
        self._windows: dict[str, GUIWindow] = {}

    def create_window(self, window_type: type[WindowT], name: str) -> WindowT:
        """Create, name and begin a window; names are case-insensitive and unique."""
        key = to_upper(name)
        if key in self._windows:
            raise EngineError(f"a GUI window named {key!r} already exists")
        window = window_type()
        self._windows[key] = window
        window.name = key
        window.begin()
        return window

    def window(self, name: str) -> GUIWindow:
        """Look up a window by name; KeyError if there is none."""
        key = to_upper(name)
        try:
            return self._windows[key]
        except KeyError:
            raise KeyError(f"no GUI window named {key!r}") from None

    def tick(self, delta_time: float, level: Any = None) -> None:
        """Tick every window that is on, in name order."""
        for _, window in sorted(self._windows.items()):
            if window.is_on:
                window.tick(delta_time, level)