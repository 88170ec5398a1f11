[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "leetkit"
version = "0.1.0"
description = "Classic algorithm and data-structure exercises: arrays, strings, linked lists, trees, grids, dynamic programming and backtracking."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "linked-list", "binary-tree", "dynamic-programming", "backtracking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
leetkit-range-sums = "leetkit.arrays:main"

[tool.hatch.build.targets.wheel]
packages = ["leetkit"]

[tool.pytest.ini_options]
addopts = "-ra"
