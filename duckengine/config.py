"""Project and window configuration stored as JSON in the project directory."""

import json
from dataclasses import dataclass, field
from pathlib import Path

from duckengine.geometry import Vec2, Vec3

__all__ = ["SETTINGS_FILE_NAME", "CUBEMAP_FACES", "Configuration"]

SETTINGS_FILE_NAME = "DucktapeProjectSettings.json"
CUBEMAP_FACES = 6


def _path_to_json(path):
    return "" if path is None else str(path)


def _path_from_json(text):
    return Path(text) if text else None


@dataclass
class Configuration:
    """Window and engine settings of a project."""

    window_size: Vec2 = field(default_factory=lambda: Vec2(500.0, 500.0))
    window_title: str = "Untitled Ducktape Project"
    version: Vec3 = field(default_factory=lambda: Vec3(1.0, 1.0, 1.0))
    window_icon_path: Path | None = None
    target_fps: int = 60
    draw_wireframe: bool = False
    vsync: bool = True
    hide_window: bool = False
    draw_to_quad: bool = True
    skybox_cubemap_paths: tuple = (None,) * CUBEMAP_FACES
    project_directory: Path | None = None
    game_module: Path | None = None

    def __post_init__(self):
        self.skybox_cubemap_paths = tuple(self.skybox_cubemap_paths)
        if len(self.skybox_cubemap_paths) != CUBEMAP_FACES:
            raise ValueError(f"a cubemap needs exactly {CUBEMAP_FACES} face paths")

    def to_json(self):
        return {
            "windowSize": self.window_size.to_json(),
            "windowTitle": self.window_title,
            "version": self.version.to_json(),
            "windowIconPath": _path_to_json(self.window_icon_path),
            "targetFPS": self.target_fps,
            "drawWireframe": self.draw_wireframe,
            "vsync": self.vsync,
            "hideWindow": self.hide_window,
            "drawToQuad": self.draw_to_quad,
            "skyboxCubemapPaths": [_path_to_json(p) for p in self.skybox_cubemap_paths],
            "projectDirectory": _path_to_json(self.project_directory),
            "gameModule": _path_to_json(self.game_module),
        }

    @classmethod
    def from_json(cls, data):
        return cls(
            window_size=Vec2.from_json(data["windowSize"]),
            window_title=str(data["windowTitle"]),
            version=Vec3.from_json(data["version"]),
            window_icon_path=_path_from_json(data["windowIconPath"]),
            target_fps=int(data["targetFPS"]),
            draw_wireframe=bool(data["drawWireframe"]),
            vsync=bool(data["vsync"]),
            hide_window=bool(data["hideWindow"]),
            draw_to_quad=bool(data["drawToQuad"]),
            skybox_cubemap_paths=tuple(
                _path_from_json(text) for text in data["skyboxCubemapPaths"]
            ),
            project_directory=_path_from_json(data["projectDirectory"]),
            game_module=_path_from_json(data["gameModule"]),
        )

    @classmethod
    def from_directory(cls, path):
        """Read the settings file of the project at ``path``."""
        path = Path(path)
        with open(path / SETTINGS_FILE_NAME, encoding="utf-8") as handle:
            config = cls.from_json(json.load(handle))
        config.project_directory = path
        return config

    def save(self):
        """Write the settings file into the project directory."""
        if self.project_directory is None:
            raise ValueError("configuration has no project directory to save into")
        target = Path(self.project_directory) / SETTINGS_FILE_NAME
        with open(target, "w", encoding="utf-8") as handle:
            json.dump(self.to_json(), handle, sort_keys=True, separators=(",", ":"))