[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gaemi"
version = "0.1.0"
description = "Core pieces of a small 2D game engine: vector, matrix and quaternion math, colours, sprite batching, input state, frame timing, logging and game-state stacking"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "2d", "sprite", "spritebatch", "vector", "matrix", "quaternion"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gaemi"]

[tool.pytest.ini_options]
addopts = "-ra"
