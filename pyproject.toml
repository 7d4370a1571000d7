[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "demostat"
version = "0.1.0"
description = "Load regional demographic statistics from CSV, compute min/max/median metrics and lay out a graph of them"
requires-python = ">=3.10"
dependencies = []
keywords = ["demographics", "statistics", "csv", "median", "graph", "population"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
demostat = "demostat.app:main"

[tool.hatch.build.targets.wheel]
packages = ["demostat"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
