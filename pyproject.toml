[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "hauntgame"
version = "0.1.0"
description = "Game-logic core of a small 3D escape game: meshes, motion scripts, player, timer, ranking and screen effects."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "motion", "keyframe", "ranking", "timer", "mesh"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["hauntgame*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
