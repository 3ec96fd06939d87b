[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tomato"
version = "0.1.0"
description = "Chess primitives: piece types, squares, packed 16-bit moves and Zobrist hash keys"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "uci", "zobrist", "board-games"]
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
packages = ["tomato"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
