[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grafo"
version = "0.1.0"
description = "Read undirected weighted graphs from a plain text format and report their properties"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "bfs", "dfs", "bipartite", "diameter", "cut vertices", "bridges"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
grafo = "grafo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["grafo"]

[tool.pytest.ini_options]
addopts = "-ra"
