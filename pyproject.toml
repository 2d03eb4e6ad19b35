[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsdrills"
version = "0.1.0"
description = "Small data-structure drills: array operations, matrices, classic sorting algorithms and recursion."
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "algorithms", "sorting", "matrices", "recursion", "education"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsdrills = "dsdrills.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dsdrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
