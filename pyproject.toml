[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "memfit"
version = "0.1.0"
description = "Contiguous memory allocation simulator with first, best and worst fit placement and compaction"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "memory",
    "allocation",
    "first-fit",
    "best-fit",
    "worst-fit",
    "compaction",
    "operating-systems",
    "simulation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
memfit = "memfit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["memfit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
