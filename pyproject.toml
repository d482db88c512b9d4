[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "protochess"
version = "0.1.0"
description = "Chess position model for variant boards with custom pieces, Zobrist hashing and a transposition table"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "chess-variants", "zobrist", "bitboard", "board-games"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["protochess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
