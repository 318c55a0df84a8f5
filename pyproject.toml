[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lollykit"
version = "0.1.0"
description = "Containers, trees, numeral conversions and text utilities: linked lists, hash maps with defaults, relative hash maps, hash sets, hash trees, stable merge sort, base64, Roman and Chinese numerals, UTF-8 helpers and benchmark timers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "containers",
    "hashmap",
    "linked-list",
    "tree",
    "trie",
    "merge-sort",
    "base64",
    "roman-numerals",
    "hanzi",
    "utf-8",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lollykit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
