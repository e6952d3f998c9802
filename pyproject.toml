[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drills"
version = "0.1.0"
description = "Classic algorithm drills: searching, arrays, text, stacks and queues, linked lists and binary trees."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "binary search", "linked list", "binary tree", "stack", "queue"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["drills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
