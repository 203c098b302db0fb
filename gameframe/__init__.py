"""Game application framework: levels, actors, GUI windows, frame timing and text editing."""

__version__ = "0.1.0"

__all__ = [
    "contents",
    "core",
    "errors",
    "gui",
    "objects",
    "paths",
    "serializer",
    "text",
    "textedit",
    "textedit_layout",
    "textedit_state",
    "timer",
]