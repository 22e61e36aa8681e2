"""Materials, vertices, textures and meshes with JSON conversion."""

from dataclasses import dataclass, field
from pathlib import Path

from duckengine.geometry import Vec2, Vec3

__all__ = ["MAX_BONE_INFLUENCE", "Material", "Vertex", "Texture", "Mesh"]

MAX_BONE_INFLUENCE = 4

_NUMBERED_TEXTURE_TYPES = ("diffuse", "specular", "normal", "height")


def _path_to_json(path):
    return "" if path is None else str(path)


def _path_from_json(text):
    return Path(text) if text else None


@dataclass
class Material:
    """Surface colour and shininess."""

    color: Vec3 = field(default_factory=lambda: Vec3(1.0, 1.0, 1.0))
    shininess: float = 0.5

    def to_json(self):
        return {"color": self.color.to_json(), "shininess": self.shininess}

    @classmethod
    def from_json(cls, data):
        return cls(Vec3.from_json(data["color"]), float(data["shininess"]))


@dataclass
class Vertex:
    """A mesh vertex; bone ids and weights are not serialized."""

    position: Vec3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    tex_coords: Vec2 = field(default_factory=Vec2)
    tangent: Vec3 = field(default_factory=Vec3)
    bitangent: Vec3 = field(default_factory=Vec3)
    bone_ids: list = field(default_factory=lambda: [0] * MAX_BONE_INFLUENCE)
    weights: list = field(default_factory=lambda: [0.0] * MAX_BONE_INFLUENCE)

    def __post_init__(self):
        if len(self.bone_ids) != MAX_BONE_INFLUENCE:
            raise ValueError(f"bone_ids must hold {MAX_BONE_INFLUENCE} entries")
        if len(self.weights) != MAX_BONE_INFLUENCE:
            raise ValueError(f"weights must hold {MAX_BONE_INFLUENCE} entries")

    def to_json(self):
        return {
            "position": self.position.to_json(),
            "normal": self.normal.to_json(),
            "texCoords": self.tex_coords.to_json(),
            "tangent": self.tangent.to_json(),
            "bitangent": self.bitangent.to_json(),
        }

    @classmethod
    def from_json(cls, data):
        return cls(
            position=Vec3.from_json(data["position"]),
            normal=Vec3.from_json(data["normal"]),
            tex_coords=Vec2.from_json(data["texCoords"]),
            tangent=Vec3.from_json(data["tangent"]),
            bitangent=Vec3.from_json(data["bitangent"]),
        )


@dataclass
class Texture:
    """An image used by a mesh; only its type and path are serialized."""

    path: Path | None = None
    type: str = ""
    width: int = 0
    height: int = 0
    channels: int = 0
    loaded: bool = False

    def to_json(self):
        return {"type": self.type, "path": _path_to_json(self.path)}

    @classmethod
    def from_json(cls, data):
        return cls(path=_path_from_json(data["path"]), type=str(data["type"]))


@dataclass
class Mesh:
    """Vertices, triangle indices and the textures drawn with them."""

    vertices: list = field(default_factory=list)
    indices: list = field(default_factory=list)
    textures: list = field(default_factory=list)

    def to_json(self):
        return {
            "vertices": [vertex.to_json() for vertex in self.vertices],
            "indices": list(self.indices),
            "textures": [texture.to_json() for texture in self.textures],
        }

    @classmethod
    def from_json(cls, data):
        return cls(
            vertices=[Vertex.from_json(item) for item in data["vertices"]],
            indices=[int(index) for index in data["indices"]],
            textures=[Texture.from_json(item) for item in data["textures"]],
        )

    def sampler_names(self):
        """Shader sampler name for each texture, in texture-unit order.

        Diffuse, specular, normal and height textures are numbered from 1
        per type; textures of any other type get no number.
        """
        counters = dict.fromkeys(_NUMBERED_TEXTURE_TYPES, 0)
        names = []
        for texture in self.textures:
            number = ""
            if texture.type in counters:
                counters[texture.type] += 1
                number = str(counters[texture.type])
            names.append(f"material.{texture.type}{number}")
        return names