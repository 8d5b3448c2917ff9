[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventofcode"
version = "0.12.0"
description = "Advent of Code puzzle solutions with a command-line tool for scaffolding, solving, timing and benchmarking days."
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "benchmarking", "scaffolding"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adventofcode = "adventofcode.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["adventofcode"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
