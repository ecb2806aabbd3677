[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pathfinding"
version = "4.3.0"
description = "Search, maximum-flow, strong-component and cycle-detection algorithms over implicit graphs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "pathfinding",
    "graph",
    "astar",
    "dijkstra",
    "bfs",
    "dfs",
    "iddfs",
    "idastar",
    "fringe",
    "edmonds-karp",
    "max-flow",
    "min-cut",
    "strongly-connected-components",
    "cycle-detection",
    "sliding-puzzle",
]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sliding-puzzle = "pathfinding.sliding_puzzle:main"

[tool.hatch.build.targets.wheel]
packages = ["pathfinding"]

[tool.hatch.build.targets.sdist]
include = ["pathfinding", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
