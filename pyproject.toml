[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "katas"
version = "0.1.0"
description = "Small, tested solutions to classic array, string, number, linked-list and binary-tree exercises."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "linked-list", "binary-tree", "exercises"]
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
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["katas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
