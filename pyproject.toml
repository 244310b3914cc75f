[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pushbox"
version = "0.1.0"
description = "A small box-pushing puzzle game with a text console mode and a frame-buffer renderer"
requires-python = ">=3.10"
dependencies = []
keywords = ["sokoban", "puzzle", "game", "box-pushing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
pushbox = "pushbox.console:main"

[tool.hatch.build.targets.wheel]
packages = ["pushbox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
