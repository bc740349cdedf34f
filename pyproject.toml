[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chesskit"
version = "0.1.0"
description = "Chess building blocks: board squares, candidate moves and piece movement rules."
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "board game", "move generation"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chesskit = "chesskit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["chesskit"]

[tool.pytest.ini_options]
addopts = "-ra"
