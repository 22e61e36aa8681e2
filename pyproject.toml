[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "duckengine"
version = "0.1.0"
description = "A small entity-component game engine core: scenes, systems, input, timing and JSON scene files."
requires-python = ">=3.10"
dependencies = []
keywords = ["game engine", "ecs", "entity component system", "scene", "serialization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["duckengine"]

[tool.pytest.ini_options]
addopts = "-ra"
