[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hanoigraph"
version = "0.1.0"
description = "Tower of Hanoi state graphs, shortest paths and simple adjacency list / matrix graphs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "tower of hanoi",
    "graph",
    "dijkstra",
    "bellman-ford",
    "adjacency matrix",
    "adjacency list",
    "shortest path",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hanoigraph = "hanoigraph.hanoi:main"
hanoigraph-paths = "hanoigraph.hanoi_paths:main"
hanoigraph-list-demo = "hanoigraph.adjacency_list:main"

[tool.hatch.build.targets.wheel]
packages = ["hanoigraph"]

[tool.hatch.build.targets.sdist]
include = ["hanoigraph", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
