"""Scenes: entities, their components, and the systems that drive them."""

from enum import Enum
from itertools import count

from duckengine.system import MAX_SYSTEMS

__all__ = ["RegisterAction", "ComponentError", "GameModule", "Scene"]


class RegisterAction(Enum):
    """What a game module is asked to do with a named component."""

    ADD_SYSTEM = 0
    ASSIGN = 1
    REMOVE = 2


class ComponentError(LookupError):
    """Raised for a missing, duplicate or unknown component or entity."""


class GameModule:
    """A set of component types known by name, plus an optional runtime hook.

    ``runtime`` is called with the scene when the module is loaded; it is
    the place to register the game's systems.
    """

    def __init__(self, runtime=None):
        self.runtime = runtime
        self._components = {}

    @property
    def component_names(self):
        return tuple(self._components)

    def register_component(self, component_type, name=None):
        """Make ``component_type`` available under ``name`` (its class name by default)."""
        self._components[name or component_type.__name__] = component_type
        return component_type

    def apply(self, name, entity, scene, action):
        """Assign or remove the component registered as ``name`` on ``entity``."""
        try:
            component_type = self._components[name]
        except KeyError:
            raise ComponentError(
                f"game module has no component registered as {name!r}"
            ) from None
        action = RegisterAction(action)
        if action is RegisterAction.ASSIGN:
            return scene.assign(entity, component_type)
        if action is RegisterAction.REMOVE:
            scene.remove(entity, component_type)
        return None


class Scene:
    """Entities with components, and the systems registered to run over them."""

    def __init__(self, engine=None, module=None):
        self.engine = engine
        self.active_camera = None
        self.initialized = False
        self.selected_entity = None
        self.game_module = None
        self._systems = []
        self._entities = {}
        self._components = {}
        self._ids = count()
        if module is not None:
            self.load_module(module)

    @property
    def systems(self):
        """Registered systems, in registration order."""
        return tuple(self._systems)

    @property
    def entities(self):
        """Live entities, in creation order."""
        return tuple(self._entities)

    def load_module(self, module):
        """Use ``module`` for named components and run its runtime hook."""
        self.game_module = module
        if module.runtime is not None:
            module.runtime(self)

    def register(self, system):
        """Add a system to the scene and return it."""
        if len(self._systems) >= MAX_SYSTEMS:
            raise RuntimeError(f"a scene holds at most {MAX_SYSTEMS} systems")
        self._systems.append(system)
        return system

    def _check_entity(self, entity):
        if entity not in self._entities:
            raise ComponentError(f"entity {entity!r} does not exist")

    def has(self, entity, component_type):
        return entity in self._components.get(component_type, {})

    def assign(self, entity, component_type):
        """Attach a new default-constructed component and return it."""
        self._check_entity(entity)
        if self.has(entity, component_type):
            raise ComponentError("Entity already has component.")
        component = component_type()
        self._components.setdefault(component_type, {})[entity] = component
        return component

    def require(self, entity, component_type):
        """Return the entity's component, assigning one first if absent."""
        if self.has(entity, component_type):
            return self.get(entity, component_type)
        return self.assign(entity, component_type)

    def get(self, entity, component_type):
        if not self.has(entity, component_type):
            raise ComponentError("Entity does not have component.")
        return self._components[component_type][entity]

    def remove(self, entity, component_type):
        if not self.has(entity, component_type):
            raise ComponentError("Entity does not have component.")
        del self._components[component_type][entity]

    def view(self, component_type):
        """Entities that have a component of ``component_type``."""
        return list(self._components.get(component_type, {}))

    def entity_of(self, component):
        """The entity that owns ``component``."""
        store = self._components.get(type(component), {})
        for entity, candidate in store.items():
            if candidate is component:
                return entity
        raise ComponentError("component does not belong to this scene")

    def create_entity(self):
        entity = next(self._ids)
        self._entities[entity] = None
        return entity

    def destroy_entity(self, entity):
        """Remove the entity together with all of its components."""
        self._check_entity(entity)
        for store in self._components.values():
            store.pop(entity, None)
        del self._entities[entity]
        if self.selected_entity == entity:
            self.selected_entity = None

    def _module(self):
        if self.game_module is None:
            raise ComponentError("no game module is loaded")
        return self.game_module

    def assign_by_name(self, entity, name):
        """Assign the game module's component registered as ``name``."""
        return self._module().apply(name, entity, self, RegisterAction.ASSIGN)

    def remove_by_name(self, entity, name):
        """Remove the game module's component registered as ``name``."""
        self._module().apply(name, entity, self, RegisterAction.REMOVE)

    def clear(self):
        """Remove every entity and component; systems stay registered."""
        self._entities.clear()
        self._components.clear()
        self._ids = count()
        self.selected_entity = None