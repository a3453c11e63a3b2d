[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "carrental"
version = "0.1.0"
description = "A small in-memory car rental book-keeping library with a line-driven add-car form"
requires-python = ">=3.10"
dependencies = []
keywords = ["car rental", "fleet", "rental", "inventory"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
carrental = "carrental.app:main"

[tool.hatch.build.targets.wheel]
packages = ["carrental"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
