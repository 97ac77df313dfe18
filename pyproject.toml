[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rubikcube"
version = "0.1.0"
description = "Rubik's cube model with cubie-level state, phase-one coordinates and a depth-limited search"
requires-python = ">=3.10"
dependencies = []
keywords = ["rubik", "cube", "puzzle", "coordinates", "two-phase", "solver"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rubikcube = "rubikcube.cli:main"
rubikcube-example = "rubikcube.cli:example"

[tool.hatch.build.targets.wheel]
packages = ["rubikcube"]

[tool.hatch.build.targets.sdist]
include = ["rubikcube", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
disallow_untyped_defs = true
