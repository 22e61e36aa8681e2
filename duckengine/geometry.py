"""Small vector and quaternion types with JSON conversion."""

from dataclasses import astuple, dataclass

__all__ = ["Vec2", "Vec3", "Quat"]


@dataclass
class Vec2:
    x: float = 0.0
    y: float = 0.0

    def __iter__(self):
        return iter(astuple(self))

    def to_json(self):
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_json(cls, data):
        return cls(float(data["x"]), float(data["y"]))


@dataclass
class Vec3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self):
        return iter(astuple(self))

    def to_json(self):
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_json(cls, data):
        return cls(float(data["x"]), float(data["y"]), float(data["z"]))


@dataclass
class Quat:
    """Quaternion stored as vector part (x, y, z) and scalar part w; identity by default."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __iter__(self):
        return iter(astuple(self))

    def to_json(self):
        return {"x": self.x, "y": self.y, "z": self.z, "w": self.w}

    @classmethod
    def from_json(cls, data):
        return cls(
            float(data["x"]), float(data["y"]), float(data["z"]), float(data["w"])
        )