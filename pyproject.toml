[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practicas"
version = "0.1.0"
description = "Coursework toolkit: maximum subsequence sums, a binary min-heap, all-pairs shortest paths, cache-behaviour experiments and the data structures of a teaching shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "heap", "dijkstra", "subsequence", "cache", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["practicas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
