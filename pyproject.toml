[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "archlab"
version = "0.1.0"
description = "Computer architecture exercises: a skip-list leaderboard, float format conversion and integer promotion"
requires-python = ">=3.10"
dependencies = []
keywords = ["skiplist", "leaderboard", "floating-point", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
archlab-leaderboard = "archlab.leaderboard_cli:main"
archlab-convert = "archlab.floatconv:main"
archlab-packed-node = "archlab.packed_node:main"

[tool.hatch.build.targets.wheel]
packages = ["archlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
