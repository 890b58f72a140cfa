[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tavernquest"
version = "0.1.0"
description = "A small tavern role-playing game: characters, turn-based combat against enemies, and an item inventory kept in a binary search tree."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "tavern", "combat", "inventory", "binary-search-tree"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tavernquest = "tavernquest.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tavernquest"]

[tool.hatch.build.targets.sdist]
include = ["tavernquest", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
