[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "collisionbench"
version = "0.1.0"
description = "Deterministic 2D circle collision detection benchmark with batched and all-pairs detection and JSON result logging"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = [
    "collision detection",
    "benchmark",
    "simulation",
    "bounding circle",
    "physics",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
collisionbench = "collisionbench.app:main"

[tool.hatch.build.targets.wheel]
packages = ["collisionbench"]

[tool.pytest.ini_options]
addopts = "-ra"
