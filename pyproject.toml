[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "statslib"
version = "1.0.0"
description = "Probability distributions, random variate generation, parameter estimation and sampling methods"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "statistics",
    "probability",
    "distributions",
    "estimation",
    "sampling",
    "metropolis-hastings",
    "random",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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

[tool.hatch.build.targets.wheel]
packages = ["statslib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
