[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bstree"
version = "0.1.0"
description = "Linked binary trees and binary search trees with parent links, plus Graphviz dot output"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary tree", "binary search tree", "bst", "graphviz", "dot", "data structures"]
classifiers = [
    "Development Status :: 3 - Alpha",
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

[project.scripts]
bstree = "bstree.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bstree"]

[tool.pytest.ini_options]
addopts = "-ra"
