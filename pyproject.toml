[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamebox"
version = "0.1.0"
description = "Three small desktop games: Minesweeper, Space Invaders and Sudoku with an automatic solver."
requires-python = ">=3.10"
keywords = ["games", "minesweeper", "space-invaders", "sudoku", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gamebox-minesweeper = "gamebox.minesweeper.app:main"
gamebox-spaceinvaders = "gamebox.spaceinvaders.app:main"
gamebox-sudoku = "gamebox.sudoku.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gamebox"]

[tool.pytest.ini_options]
addopts = "-ra"
