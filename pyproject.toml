[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphsearch"
version = "0.1.0"
description = "Classic uninformed and heuristic graph search algorithms on small undirected graphs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "search",
    "bfs",
    "dfs",
    "iterative-deepening",
    "a-star",
    "beam-search",
    "hill-climbing",
    "branch-and-bound",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphsearch = "graphsearch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["graphsearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
