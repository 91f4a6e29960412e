[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridgames"
version = "0.1.0"
description = "Three small grid games: a biggest-square solver, a two-terminal battleship and a duck shooter"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["games", "battleship", "navy", "bsq", "largest-square", "duck-hunt", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gridgames-bsq = "gridgames.bsq:main"
gridgames-navy = "gridgames.navy_game:main"
gridgames-hunter = "gridgames.hunter:main"

[tool.hatch.build.targets.wheel]
packages = ["gridgames"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
