# duckengine

The core of an entity-component game engine, written in plain Python with no
dependencies.

## What is in it

- **Scenes** (`duckengine.scene`): `Scene` creates and destroys entities
  (`create_entity`, `destroy_entity`, `clear`) and attaches components by type
  with `assign`, `require`, `get`, `remove`, `has`, `view` and `entity_of`.
  Missing, duplicate or unknown components raise `ComponentError`. A scene
  holds at most 64 systems, added with `register`.
- **Game modules** (`duckengine.scene`): a `GameModule` maps names to
  component types (`register_component`), so `Scene.assign_by_name` and
  `Scene.remove_by_name` can attach and remove components by name. Its
  optional `runtime` callable is run with the scene when the module is loaded,
  either through `Scene(engine, module)` or `Scene.load_module`.
- **Systems** (`duckengine.system`): subclass `System` and override any of
  `init`, `tick`, `scene_view`, `destroy`, `inspector` and `serialize`. Or wrap
  a component type in `GenericSystem`, which calls the hook of the same name on
  every component of that type that defines it, as
  `hook(entity, scene, engine)`.
- **Engine** (`duckengine.engine`): `Engine` holds the `Configuration`,
  `Input`, `Time`, `LoopManager`, `Debug`, `Serialization` and two
  `LightSlots` pools (`directional_lights`, `point_lights`). `init(scene)` runs
  the systems' `init` hooks. `start_frame` updates time from the engine's clock
  and input from `engine.cursor_position`, then ticks the active scene's
  systems unless `loop_manager.scene_tick` is false. `run(scene)` loops until
  `close()` is called. A `clock` callable returning seconds may be passed in;
  by default it counts from the engine's creation.
- **Scene files** (`duckengine.scene_manager`): `save(path, scene, engine)`
  runs every system's `serialize` hook and writes the collected components as
  JSON. `load(path, scene, engine)` clears the scene and recreates the
  entities. It attaches their components by name, feeds the stored values back
  through the `serialize` hooks, then runs the `init` hooks.
- **Project settings** (`duckengine.config`): `Configuration` holds window and
  engine settings. `Configuration.from_directory(path)` reads
  `DucktapeProjectSettings.json` from a project directory and `save()` writes
  it back. `to_json` and `from_json` convert it to and from a dict.
- **Input** (`duckengine.input`, `duckengine.keys`): feed events in with
  `key_callback(key, action)` and `mouse_button_callback(button, action)`,
  using `Action.PRESS` / `Action.RELEASE`. Query them with `key_held`,
  `key_pressed`, `key_released` and the `mouse_button_*` equivalents.
  "Pressed" and "released" last until the next `process(x, y)`, which also
  updates `mouse_position` and `mouse_delta`. `Key` and `MouseButton` hold the
  key and button codes.
- **Timing** (`duckengine.timing`): `Time.update(now)` sets `delta_time`,
  `elapsed_time` and `fps`.
- **Log capture** (`duckengine.debug`): `Debug` is a context manager that
  redirects `sys.stdout` and `sys.stderr` into buffers, read back with
  `out_text` / `err_text` and emptied with `clear_out`, `clear_err` or `clear`.
- **Data types**: `Vec2`, `Vec3`, `Quat` (`duckengine.geometry`) and
  `Material`, `Vertex`, `Texture`, `Mesh` (`duckengine.materials`). Each
  round-trips through `to_json` / `from_json`. `Mesh.sampler_names()` gives
  the shader sampler name of each texture (`material.diffuse1`, ...).
- **Light slots** (`duckengine.lights`): `LightSlots.acquire()` hands out the
  lowest free of a fixed number of slots (25 by default) and raises
  `NoFreeLightSlot` when none is left. `release(spot)` frees one.

## Install

```
pip install .
```

## Example

```python
from dataclasses import dataclass

from duckengine import scene_manager
from duckengine.engine import Engine
from duckengine.scene import GameModule, Scene
from duckengine.system import GenericSystem


@dataclass
class Spinner:
    angle: float = 0.0

    def tick(self, entity, scene, engine):
        self.angle += 90.0 * engine.time.delta_time

    def serialize(self, entity, scene, engine):
        engine.serialization.serialize_component("Spinner", self, entity)


module = GameModule(runtime=lambda scene: scene.register(GenericSystem(Spinner)))
module.register_component(Spinner)

engine = Engine()
scene = Scene(engine, module)

entity = scene.create_entity()
scene.assign(entity, Spinner)

engine.init(scene)
engine.start_frame()
engine.end_frame()
print(scene.get(entity, Spinner).angle)

scene_manager.save("level.json", scene, engine)
scene_manager.load("level.json", scene, engine)
```

During `save`, a component's `serialize` hook stores it with
`Serialization.serialize_component`. During `load`, the same call overwrites
the component with the next stored entry. Components are converted through
their own `to_json` / `from_json` when they have them, and as dataclass fields
otherwise. Every component name in a scene file must be registered with the
scene's `GameModule` before loading.

## What it does not do

There is no window, rendering, shader, texture loading, model importing or
editor user interface here, and no command-line program. The host application
creates any window. It feeds key and mouse events into `Engine.input`, sets
`Engine.cursor_position` and calls `start_frame` / `end_frame`. `Texture` and
`Mesh` only hold data; they load no image files and upload nothing to a
graphics device. Game modules are ordinary Python objects built in code, not
shared libraries loaded from disk.

## Tests

```
pip install .[test]
pytest
```