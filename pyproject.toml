[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "klft"
version = "0.0.1"
description = "Lattice gauge theory building blocks: SU(N) gauge fields, staples, spinors and Metropolis sweeps"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["lattice", "gauge theory", "SU(N)", "Metropolis", "spinor", "physics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["klft"]

[tool.pytest.ini_options]
addopts = "-ra"
