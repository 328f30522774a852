[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edakit"
version = "0.1.0"
description = "Classic data structures and algorithms: linked lists, stacks, queues, search trees, sorting, grid search, mazes and BMP reading."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "linked list",
    "stack",
    "queue",
    "binary search tree",
    "avl",
    "quicksort",
    "maximum subsequence sum",
    "maze",
]
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
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
edakit-rb = "edakit.rb:main"
edakit-labyrinth = "edakit.labyrinth:main"
edakit-image = "edakit.image:main"

[tool.hatch.build.targets.wheel]
packages = ["edakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
