from gameframe.objects import EngineActor, EngineComponent, EngineLevel, EngineObject


class Recorder(EngineActor):
    log = []

    def __init__(self):
        super().__init__()
        self.began = False

    def begin(self):
        self.began = True

    def tick(self, delta_time):
        Recorder.log.append((self.name, delta_time))


class FakeGUI:
    def __init__(self):
        self.calls = []

    def tick(self, delta_time, level):
        self.calls.append((delta_time, level))


def test_object_death_flag():
    obj = EngineObject()
    assert not obj.is_death()
    obj.death()
    assert obj.is_death()


def test_component_is_object():
    comp = EngineComponent()
    comp.death()
    assert comp.is_death()
    assert comp.name == ""


def test_create_actor_begins_and_names():
    level = EngineLevel()
    actor = level.create_actor(Recorder)
    assert actor.began
    assert actor.name == "Recorder"
    named = level.create_actor(Recorder, 2, "hero")
    assert named.name == "hero"
    assert level.actors(2) == [named]
    assert level.actors(0) == [actor]


def test_update_runs_in_order():
    Recorder.log = []
    level = EngineLevel()
    level.create_actor(Recorder, 5, "late")
    level.create_actor(Recorder, -1, "early")
    level.create_actor(Recorder, 0, "mid")
    level.actor_update(0.25)
    assert [name for name, _ in Recorder.log] == ["early", "mid", "late"]
    assert all(dt == 0.25 for _, dt in Recorder.log)


def test_release_removes_dead():
    level = EngineLevel()
    keep = level.create_actor(Recorder, 0, "keep")
    drop = level.create_actor(Recorder, 0, "drop")
    drop.death()
    level.actor_release()
    assert level.actors() == [keep]


def test_level_tick_forwards_to_gui():
    gui = FakeGUI()
    level = EngineLevel(gui)
    level.tick(0.5)
    assert gui.calls == [(0.5, level)]


def test_level_tick_without_gui_touches_no_actor():
    Recorder.log = []
    level = EngineLevel()
    level.create_actor(Recorder)
    level.tick(1.0)
    assert Recorder.log == []