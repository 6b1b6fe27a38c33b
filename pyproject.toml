[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "classroster"
version = "0.1.0"
description = "Load a class roster of students from CSV text and sort it by perm number."
requires-python = ">=3.10"
dependencies = []
keywords = ["roster", "students", "csv", "selection sort"]
classifiers = [
    "Development Status :: 4 - Beta",
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

[tool.hatch.build.targets.wheel]
packages = ["classroster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
