[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kongworld"
version = "0.1.0"
description = "A small barrel-and-ladder arcade world whose enemies, barrels, platforms, items and game mode report what they do on a shared screen."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "platformer", "barrels", "ladders"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kongworld = "kongworld.game:main"

[tool.hatch.build.targets.wheel]
packages = ["kongworld"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
