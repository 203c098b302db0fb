# gameframe

A compact framework for building small game-style applications. It contains
the following modules.

- `gameframe.objects`: `EngineObject`, `EngineActor`, `EngineComponent` and
  `EngineLevel`. A level groups its actors by update order. It ticks them
  lowest order first, and `actor_release` drops actors marked with `death()`.
- `gameframe.gui`: `EngineGUI` is a registry of `GUIWindow` objects. Window
  names are case-insensitive and must be unique. Each frame, every window
  that is on is ticked with the current level.
- `gameframe.core`: `EngineCore` registers levels by upper-cased name and
  switches between them with `change_level`. It runs frames with `tick` and
  `run`. A missing, duplicated or unselected level raises `LevelError`.
- `gameframe.timer`: `EngineTime` measures the seconds between successive
  `time_check` calls. It accepts an injectable clock.
- `gameframe.paths`: `EnginePath`, `EngineDirectory` and `EngineFile` are
  movable filesystem paths. `move_parent_to_child_path` raises
  `PathNotFoundError` when no parent holds the child.
- `gameframe.serializer`: `Serializer` is a growable byte buffer with separate
  read and write offsets. Reading past what was written raises `EOFError`.
- `gameframe.text`: `to_upper` upper-cases ASCII letters only.
  `ascii_to_unicode` decodes bytes in the system's preferred encoding.
- `gameframe.errors`: `EngineError` and `engine_assert`.
- `gameframe.textedit`: a multi-line text-editing engine with selection, word
  movement, insert mode, page movement and undo/redo. It offers `key()` and
  the `Key` codes, plus a convenient `TextEditor`. Its layout and mouse part
  is `gameframe.textedit_layout`, which includes `MonospaceBuffer`. Its
  cursor and undo-history part is `gameframe.textedit_state`.
- `gameframe.contents`: the sample application. It provides `GraphicTestLevel`,
  `TestLevel`, `TestGUI`, `contents_begin`, `contents_end` and `main`.

## Installation

```
pip install .
```

## Quick start

```python
from gameframe.core import EngineCore
from gameframe.objects import EngineActor, EngineLevel


class Player(EngineActor):
    def tick(self, delta_time):
        print("player ticked", delta_time)


class MainLevel(EngineLevel):
    def begin(self):
        self.create_actor(Player)


core = EngineCore()
core.create_level(MainLevel)
core.change_level("MainLevel")
core.tick()
```

`EngineCore.run(begin, end, frames)` does the following:

1. It calls `begin(core)`.
2. It ticks the current level `frames` times, or until interrupted when
   `frames` is `None`.
3. It always calls `end(core)`.

It returns the number of frames run.

### Text editing

```python
from gameframe.textedit import Key, TextEditor

editor = TextEditor("hello", single_line=True)
editor.press(Key.TEXTEND)
editor.type(" world")
editor.press(Key.LEFT | Key.SHIFT)
print(editor.selection())  # "d"
editor.undo()              # each typed character is one undo step
print(editor.text())       # "hello worl"
```

## Command line

The sample application creates `GraphicTestLevel`, makes it current and runs
frames until interrupted:

```
gameframe
gameframe --frames 10
```

## What it does not do

The package keeps no graphics state of any kind. It does not:

- open a window;
- create a rendering device;
- draw anything;
- provide vector or matrix math.

GUI windows are named hooks whose `tick` is called each frame. Drawing is up
to the subclass. The command line runs the frame loop of an empty level and
shows nothing on screen. There is no networking or chat support.

## Running the tests

```
pip install .[test]
pytest
```