[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hermeskit"
version = "0.1.0"
description = "Pieces of a small UI toolkit: a growable array, colour and UTF-8 helpers, a built-in bitmap font, a GPU painter with a glyph atlas, and unit-converter and to-do list models."
requires-python = ">=3.10"
dependencies = []
keywords = ["ui", "painter", "bitmap-font", "glyph-atlas", "utf-8", "hsv", "unit-converter", "todo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hermeskit"]

[tool.hatch.build.targets.sdist]
include = ["hermeskit", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
