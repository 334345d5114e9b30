[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "countysearch"
version = "0.1.0"
description = "Compare a trie and a chained hash map for looking up US county population data"
requires-python = ">=3.10"
dependencies = []
keywords = ["trie", "hashmap", "hash table", "prefix search", "county", "census"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
countysearch = "countysearch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["countysearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
