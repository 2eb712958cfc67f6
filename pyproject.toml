[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aulaestructuras"
version = "0.1.0"
description = "Classroom examples of searching, hashing, linked lists, stacks and queues, with small console programs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "data structures",
    "linked list",
    "stack",
    "queue",
    "hashing",
    "fibonacci search",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
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
aula-search = "aulaestructuras.search:main"
aula-hashing = "aulaestructuras.hashing:main"
aula-basics = "aulaestructuras.basics:main"
aula-forms = "aulaestructuras.forms:main"
aula-csvgen = "aulaestructuras.csvgen:main"
aula-linked-list = "aulaestructuras.linked_list:main"
aula-stack = "aulaestructuras.stack:main"
aula-queue = "aulaestructuras.linked_queue:main"

[tool.hatch.build.targets.wheel]
packages = ["aulaestructuras"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"
