"""Systems that run per-frame hooks over the components of a scene."""

__all__ = ["MAX_SYSTEMS", "System", "GenericSystem"]

MAX_SYSTEMS = 64


class System:
    """Base class for scene systems; every hook does nothing by default."""

    def init(self, scene, engine):
        """Called once when the scene starts."""

    def tick(self, scene, engine):
        """Called every frame while the scene is ticking."""

    def scene_view(self, scene, engine):
        """Called when the scene view is drawn."""

    def destroy(self, scene, engine):
        """Called when the scene is torn down."""

    def inspector(self, scene, engine):
        """Called when the inspector is drawn."""

    def serialize(self, scene, engine):
        """Called when the scene is saved or loaded."""


class GenericSystem(System):
    """Forwards each hook to every component of one type that defines it.

    A component hook receives ``(entity, scene, engine)``. Components that
    lack a hook are skipped for that hook.
    """

    def __init__(self, component_type):
        self.component_type = component_type

    def __repr__(self):
        return f"{type(self).__name__}({self.component_type.__name__})"

    def _forward(self, hook, scene, engine):
        if not callable(getattr(self.component_type, hook, None)):
            return
        for entity in list(scene.view(self.component_type)):
            component = scene.get(entity, self.component_type)
            getattr(component, hook)(entity, scene, engine)

    def init(self, scene, engine):
        self._forward("init", scene, engine)

    def tick(self, scene, engine):
        self._forward("tick", scene, engine)

    def scene_view(self, scene, engine):
        self._forward("scene_view", scene, engine)

    def destroy(self, scene, engine):
        self._forward("destroy", scene, engine)

    def inspector(self, scene, engine):
        self._forward("inspector", scene, engine)

    def serialize(self, scene, engine):
        self._forward("serialize", scene, engine)