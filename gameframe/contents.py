"""Application contents: the levels and windows the program starts with."""

from __future__ import annotations

import argparse

from .core import EngineCore
from .gui import GUIWindow
from .objects import EngineLevel

TITLE = "ChatServer"


class TestGUI(GUIWindow):
    """An empty window used to check that the GUI loop runs."""

    __test__ = False


class TestLevel(EngineLevel):
    """A level that opens a single test window when it begins."""

    __test__ = False

    def begin(self) -> None:
        if self.gui is not None:
            self.gui.create_window(TestGUI, "TestWindow")


class GraphicTestLevel(EngineLevel):
    """The level the application shows first."""


def contents_begin(core: EngineCore) -> None:
    """Create the start level and make it current."""
    core.create_level(GraphicTestLevel)
    core.change_level("GraphicTestLevel")


def contents_end(core: EngineCore) -> None:
    """Release application contents; nothing is held beyond the core."""


def main(argv: list[str] | None = None) -> int:
    """Run the engine with the application contents."""
    parser = argparse.ArgumentParser(prog=TITLE)
    parser.add_argument(
        "--frames",
        type=int,
        default=None,
        help="number of frames to run (runs until interrupted when omitted)",
    )
    args = parser.parse_args(argv)
    if args.frames is not None and args.frames < 0:
        parser.error("--frames must not be negative")
    core = EngineCore()
    try:
        core.run(contents_begin, contents_end, frames=args.frames)
    except KeyboardInterrupt:
        pass
    return 0