[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snakestage"
version = "0.1.0"
description = "Snake game model with a grid map, stages, missions, items, gates and temporary walls"
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "game", "curses", "terminal", "arcade", "stages", "missions"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snakestage-demo = "snakestage.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["snakestage"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
