[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "securedtable"
version = "0.1.0"
description = "A chained hash table keyed by a SHA-256 based hash, with a small linked list and printf helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash table", "sha256", "linked list", "printf"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["securedtable"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
