[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsbasics"
version = "0.1.0"
description = "Classic data structures: binary and AVL trees, linked lists, heaps, priority queues, a matrix graph, bounded queues and stacks."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "avl tree",
    "binary tree",
    "linked list",
    "heap",
    "priority queue",
    "queue",
    "stack",
    "graph",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dsbasics"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
