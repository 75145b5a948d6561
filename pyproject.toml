[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seabattle"
version = "0.1.0"
description = "A line-protocol Battleship player with a fixed fleet and an edge-then-checkerboard firing strategy"
requires-python = ">=3.10"
keywords = ["battleship", "board game", "protocol", "tournament", "state machine"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
seabattle = "seabattle.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["seabattle"]

[tool.pytest.ini_options]
addopts = "-ra"
