"""Core of an entity-component game engine: scenes, systems, input, timing, settings and JSON scene files."""

__version__ = "0.1.0"