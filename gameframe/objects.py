"""Engine objects, actors, components and the level that owns actors."""

from __future__ import annotations

from typing import Any, TypeVar


class EngineObject:
    """Base of everything the engine updates: a name and a death flag."""

    def __init__(self) -> None:
        self.name = ""
        self._dead = False

    def begin(self) -> None:
        """Called once after the object is created and registered."""

    def tick(self, delta_time: float) -> None:
        """Called every frame."""

    def death(self) -> None:
        """Mark the object for removal at the end of the frame."""
        self._dead = True

    def is_death(self) -> bool:
        return self._dead


class EngineActor(EngineObject):
    """An object that lives in a level."""


class EngineComponent(EngineObject):
    """A part attached to an actor."""


ActorT = TypeVar("ActorT", bound=EngineActor)


class EngineLevel(EngineObject):
    """A scene holding actors grouped by update order."""

    def __init__(self, gui: Any = None) -> None:
        super().__init__()
        self.gui = gui
        self._actors: dict[int, list[EngineActor]] = {}

    def tick(self, delta_time: float) -> None:
        """Tick the GUI windows, if the level has a GUI."""
        if self.gui is not None:
            self.gui.tick(delta_time, self)

    def create_actor(self, actor_type: type[ActorT], order: int = 0, name: str = "") -> ActorT:
        """Create, register and begin an actor; its name defaults to the type name."""
        actor = actor_type()
        actor.name = name or actor_type.__name__
        self._actors.setdefault(order, []).append(actor)
        actor.begin()
        return actor

    def actors(self, order: int | None = None) -> list[EngineActor]:
        """Actors of one order, or of all orders in ascending order."""
        if order is not None:
            return list(self._actors.get(order, ()))
        return [actor for key in sorted(self._actors) for actor in self._actors[key]]

    def actor_update(self, delta_time: float) -> None:
        """Tick every actor, lowest order first."""
        for actor in self.actors():
            actor.tick(delta_time)

    def actor_release(self) -> None:
        """Remove every actor marked dead."""
        for key, group in self._actors.items():
            self._actors[key] = [a for a in group if a is not None and not a.is_death()]