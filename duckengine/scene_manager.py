"""Saving scenes to and loading them from JSON files."""

import json
from pathlib import Path

__all__ = ["save", "load"]


def save(path, scene, engine):
    """Serialize every component of ``scene`` through its systems into ``path``."""
    serialization = engine.serialization
    serialization.data.clear()
    serialization.is_serializing = True
    for system in scene.systems:
        system.serialize(scene, engine)
    Path(path).write_text(json.dumps(serialization.data, indent=4), encoding="utf-8")


def load(path, scene, engine):
    """Rebuild ``scene`` from the file at ``path`` and initialise its systems.

    Entities are recreated with the ids they were saved under; ids missing
    from the file become entities without components.
    """
    serialization = engine.serialization
    serialization.data = json.loads(Path(path).read_text(encoding="utf-8"))

    by_entity = {}
    for component in serialization.data.get("components", []):
        by_entity.setdefault(int(component["entity"]), []).append(component["id"])

    scene.clear()
    entity_count = max(by_entity) + 1 if by_entity else 0
    for index in range(entity_count):
        entity = scene.create_entity()
        for name in by_entity.get(index, []):
            scene.assign_by_name(entity, name)

    serialization.is_serializing = False
    for system in scene.systems:
        system.serialize(scene, engine)
    for system in scene.systems:
        system.init(scene, engine)

    print("Loaded scene successfully")