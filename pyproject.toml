[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "platformer"
version = "0.1.0"
description = "A small platform game: a menu, a tile map read from a level file and a character that runs and jumps"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "platformer", "pygame", "tile map", "arcade"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
platformer = "platformer.main:main"

[tool.hatch.build.targets.wheel]
packages = ["platformer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
