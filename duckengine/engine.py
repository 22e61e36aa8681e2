"""The engine: frame loop, input, timing and component serialization."""

import time as _time
from dataclasses import asdict, is_dataclass

from duckengine.config import Configuration
from duckengine.debug import Debug
from duckengine.input import Input
from duckengine.lights import LightSlots
from duckengine.timing import Time

__all__ = ["LoopManager", "Serialization", "Engine"]


class LoopManager:
    """Switches for the frame loop."""

    def __init__(self, scene_tick=True):
        self.scene_tick = scene_tick


def _component_to_json(component):
    if callable(getattr(component, "to_json", None)):
        return dict(component.to_json())
    if is_dataclass(component):
        return asdict(component)
    raise TypeError(f"{type(component).__name__} cannot be serialized")


def _component_from_json(component_type, data):
    if callable(getattr(component_type, "from_json", None)):
        return component_type.from_json(data)
    if is_dataclass(component_type):
        return component_type(**data)
    raise TypeError(f"{component_type.__name__} cannot be deserialized")


class Serialization:
    """Collects components into ``data`` or feeds them back out of it.

    While ``is_serializing`` is true, components are appended to
    ``data["components"]``; otherwise each call consumes the first entry.
    """

    def __init__(self):
        self.data = {}
        self.is_serializing = True

    def serialize_component(self, name, component, entity):
        """Store ``component`` or overwrite it from the next stored entry."""
        if self.is_serializing:
            entry = _component_to_json(component)
            entry["id"] = name
            entry["entity"] = entity
            self.data.setdefault("components", []).append(entry)
            return component

        pending = self.data.get("components") or []
        if not pending:
            raise ValueError("no serialized components left to load")
        entry = dict(pending.pop(0))
        entry.pop("id", None)
        entry.pop("entity", None)
        loaded = _component_from_json(type(component), entry)
        vars(component).update(vars(loaded))
        return component


class Engine:
    """Owns the per-frame state and drives the systems of the active scene.

    ``clock`` returns seconds; by default it counts from engine creation.
    The host feeds window events into :attr:`input` and sets
    :attr:`cursor_position` before each frame.
    """

    def __init__(self, configuration=None, clock=None):
        self.config = configuration if configuration is not None else Configuration()
        if clock is None:
            start = _time.perf_counter()

            def clock():
                return _time.perf_counter() - start

        self._clock = clock
        self.input = Input()
        self.time = Time()
        self.loop_manager = LoopManager()
        self.debug = Debug()
        self.serialization = Serialization()
        self.directional_lights = LightSlots()
        self.point_lights = LightSlots()
        self.active_scene = None
        self.cursor_position = (0.0, 0.0)
        self.frame_count = 0
        self._open = True

    def init(self, scene):
        """Make ``scene`` active and run every system's init hook."""
        self.active_scene = scene
        for system in scene.systems:
            system.init(scene, self)
        scene.initialized = True

    def is_open(self):
        return self._open

    def close(self):
        """Ask the frame loop to stop after the current frame."""
        self._open = False

    def start_frame(self):
        """Advance time and input, then tick the active scene's systems."""
        self.time.update(self._clock())
        self.input.process(*self.cursor_position)
        if self.loop_manager.scene_tick:
            scene = self.active_scene
            if scene is None:
                raise RuntimeError("no active scene to tick")
            for system in scene.systems:
                system.tick(scene, self)

    def end_frame(self):
        self.frame_count += 1

    def run(self, scene):
        """Initialise ``scene`` and run frames until the engine is closed."""
        self.init(scene)
        while self.is_open():
            self.start_frame()
            self.end_frame()