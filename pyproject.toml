[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bvcreator"
version = "0.0.1"
description = "Building blocks for attaching collision volumes to 3D models: collision shapes, mesh containers, rigid bodies, debug line recording and events."
requires-python = ">=3.10"
dependencies = []
keywords = ["collision", "bounding-volume", "physics", "mesh", "rigid-body", "game-tools"]
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
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bvcreator"]

[tool.pytest.ini_options]
addopts = "-ra"
