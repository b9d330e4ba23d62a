[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "primordial"
version = "2.0.0"
description = "Ecology systems for an artificial-life ecosystem simulator: terrain kinds, food, predation, depletion, obstacles and environment reshuffles"
requires-python = ">=3.10"
dependencies = []
keywords = ["artificial-life", "ecosystem", "simulation", "terrain", "ecology", "predation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Life",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["primordial"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
