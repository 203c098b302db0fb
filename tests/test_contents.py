import itertools

import pytest

from gameframe import contents
from gameframe.core import EngineCore
from gameframe.errors import EngineError


def _clock():
    counter = itertools.count()
    return lambda: float(next(counter))


def test_contents_begin_selects_graphic_test_level():
    core = EngineCore(_clock())
    contents.contents_begin(core)
    level = core.current_level()
    assert isinstance(level, contents.GraphicTestLevel)
    assert level.name == "GRAPHICTESTLEVEL"


def test_run_with_contents_counts_frames():
    core = EngineCore(_clock())
    ran = core.run(contents.contents_begin, contents.contents_end, frames=3)
    assert ran == 3
    assert isinstance(core.current_level(), contents.GraphicTestLevel)


def test_contents_end_keeps_current_level():
    core = EngineCore(_clock())
    contents.contents_begin(core)
    before = core.current_level()
    contents.contents_end(core)
    assert core.current_level() is before


def test_test_level_creates_test_window():
    core = EngineCore(_clock())
    core.create_level(contents.TestLevel)
    window = core.gui.window("testwindow")
    assert isinstance(window, contents.TestGUI)
    assert window.name == "TESTWINDOW"


def test_second_test_level_duplicates_window():
    core = EngineCore(_clock())
    core.create_level(contents.TestLevel)
    with pytest.raises(EngineError):
        core.create_level(contents.TestLevel, "Another")


def test_contents_begin_twice_fails():
    core = EngineCore(_clock())
    contents.contents_begin(core)
    with pytest.raises(EngineError):
        contents.contents_begin(core)


def test_main_runs_requested_frames():
    assert contents.main(["--frames", "2"]) == 0


def test_main_rejects_negative_frames():
    with pytest.raises(SystemExit):
        contents.main(["--frames", "-1"])