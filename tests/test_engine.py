from dataclasses import dataclass

import pytest

from duckengine.engine import Engine, LoopManager, Serialization
from duckengine.geometry import Vec3
from duckengine.input import Action
from duckengine.keys import Key
from duckengine.materials import Material
from duckengine.scene import Scene
from duckengine.system import System


@dataclass
class Score:
    value: int = 0
    label: str = ""


class Recorder(System):
    def __init__(self):
        self.inits = 0
        self.ticks = 0

    def init(self, scene, engine):
        self.inits += 1

    def tick(self, scene, engine):
        self.ticks += 1


class Closer(System):
    def __init__(self, after):
        self.after = after
        self.ticks = 0

    def tick(self, scene, engine):
        self.ticks += 1
        if self.ticks >= self.after:
            engine.close()


def make_clock(values):
    readings = iter(values)
    return lambda: next(readings)


def test_serialize_component_appends_entry_with_id_and_entity():
    serialization = Serialization()
    material = Material(Vec3(0.5, 0.25, 1.0), 2.0)
    serialization.serialize_component("Material", material, 3)
    entries = serialization.data["components"]
    assert len(entries) == 1
    assert entries[0]["id"] == "Material"
    assert entries[0]["entity"] == 3
    assert entries[0]["shininess"] == 2.0


def test_serialize_then_deserialize_restores_component():
    serialization = Serialization()
    original = Material(Vec3(0.5, 0.25, 1.0), 2.0)
    serialization.serialize_component("Material", original, 0)
    serialization.is_serializing = False
    target = Material()
    result = serialization.serialize_component("Material", target, 0)
    assert result is target
    assert target == original
    assert serialization.data["components"] == []


def test_deserialize_consumes_entries_in_order():
    serialization = Serialization()
    serialization.serialize_component("Score", Score(1, "a"), 0)
    serialization.serialize_component("Score", Score(2, "b"), 1)
    serialization.is_serializing = False
    first, second = Score(), Score()
    serialization.serialize_component("Score", first, 0)
    serialization.serialize_component("Score", second, 1)
    assert (first, second) == (Score(1, "a"), Score(2, "b"))


def test_dataclass_component_serializes_its_fields():
    serialization = Serialization()
    serialization.serialize_component("Score", Score(7, "x"), 2)
    assert serialization.data["components"][0] == {
        "value": 7,
        "label": "x",
        "id": "Score",
        "entity": 2,
    }


def test_deserialize_without_entries_raises():
    serialization = Serialization()
    serialization.is_serializing = False
    with pytest.raises(ValueError):
        serialization.serialize_component("Score", Score(), 0)


def test_unserializable_component_raises_type_error():
    serialization = Serialization()
    with pytest.raises(TypeError):
        serialization.serialize_component("Thing", object(), 0)


def test_loop_manager_ticks_by_default():
    assert LoopManager().scene_tick is True


def test_init_runs_system_init_and_marks_scene():
    engine = Engine(clock=make_clock([0.0]))
    scene = Scene()
    recorder = scene.register(Recorder())
    engine.init(scene)
    assert recorder.inits == 1
    assert scene.initialized is True
    assert engine.active_scene is scene


def test_start_frame_ticks_systems_and_updates_time():
    engine = Engine(clock=make_clock([1.0, 1.5]))
    scene = Scene()
    recorder = scene.register(Recorder())
    engine.init(scene)
    engine.start_frame()
    engine.start_frame()
    assert recorder.ticks == 2
    assert engine.time.elapsed_time == 1.5
    assert engine.time.delta_time == pytest.approx(0.5)


def test_start_frame_skips_tick_when_disabled():
    engine = Engine(clock=make_clock([1.0]))
    scene = Scene()
    recorder = scene.register(Recorder())
    engine.init(scene)
    engine.loop_manager.scene_tick = False
    engine.start_frame()
    assert recorder.ticks == 0


def test_start_frame_without_scene_raises():
    engine = Engine(clock=make_clock([1.0]))
    with pytest.raises(RuntimeError):
        engine.start_frame()


def test_start_frame_resets_per_frame_input():
    engine = Engine(clock=make_clock([1.0, 2.0]))
    engine.init(Scene())
    engine.input.key_callback(Key.W, Action.PRESS)
    assert engine.input.key_pressed(Key.W)
    engine.cursor_position = (10.0, 4.0)
    engine.start_frame()
    assert not engine.input.key_pressed(Key.W)
    assert engine.input.key_held(Key.W)
    assert engine.input.mouse_delta == (10.0, 4.0)


def test_run_until_closed():
    engine = Engine(clock=make_clock([0.1 * n for n in range(1, 10)]))
    scene = Scene()
    closer = scene.register(Closer(after=3))
    engine.run(scene)
    assert closer.ticks == 3
    assert engine.frame_count == 3
    assert engine.is_open() is False


def test_engine_uses_given_configuration():
    scene_engine = Engine()
    assert scene_engine.config.window_title == "Untitled Ducktape Project"
    assert scene_engine.is_open() is True