[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "halrium"
version = "0.1.0"
description = "Rendering-free game logic for a two-player constellation-connecting puzzle: scores, timer, effects, title screen and WAVE sound bank"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "constellation", "zodiac", "bezier", "wave"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["halrium"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
