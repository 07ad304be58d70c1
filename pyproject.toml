[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "saga"
version = "0.1.0"
description = "A small in-memory, column-oriented table of named columns"
requires-python = ">=3.10"
dependencies = []
keywords = ["table", "columns", "tabular", "in-memory"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["saga"]

[tool.pytest.ini_options]
addopts = "-ra"
