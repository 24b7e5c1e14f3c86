[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadplay"
version = "0.1.0"
description = "Pure-Python game logic: tile-based platformer physics, particle simulation and small classic game simulations"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "physics", "platformer", "particles", "simulation", "snake", "asteroids", "life", "arkanoid"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quadplay"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
