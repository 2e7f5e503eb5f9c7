[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numtypes"
version = "0.1.0"
description = "Small numeric and container types: complex numbers, rationals and a bounded stack"
requires-python = ">=3.10"
dependencies = []
keywords = ["complex", "rational", "fraction", "stack", "arithmetic"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numtypes-complex = "numtypes.complexnum:main"
numtypes-rational = "numtypes.rational:main"
numtypes-stack = "numtypes.stack:main"

[tool.hatch.build.targets.wheel]
packages = ["numtypes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
