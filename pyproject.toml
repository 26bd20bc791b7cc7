[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solvekit"
version = "0.1.0"
description = "Plain-Python solutions to classic algorithm problems over arrays, strings, grids, trees, graphs and heaps."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "dynamic-programming", "graphs", "trees", "heaps"]
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

[tool.hatch.build.targets.wheel]
packages = ["solvekit"]

[tool.pytest.ini_options]
addopts = "-ra"
