[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "disasterprep"
version = "0.1.0"
description = "Choose the fewest cities to stockpile emergency supplies in so that every city in a road network is covered."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "dominating-set",
    "graph",
    "backtracking",
    "disaster-planning",
    "road-network",
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
disasterprep = "disasterprep.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["disasterprep"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
