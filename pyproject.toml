[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deathrooms"
version = "0.1.0"
description = "A small top-down game with a scene-based engine, frame-strip sprite animation and a camera that follows the player."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "pygame", "top-down", "scenes", "animation", "sprite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
deathrooms = "deathrooms.main:main"

[tool.hatch.build.targets.wheel]
packages = ["deathrooms"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
