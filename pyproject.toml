[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "algobook"
version = "0.1.0"
description = "Classic textbook algorithms and data structures: sorting, selection, dynamic programming, geometry, matrices, symbol tables and graphs"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data structures", "sorting", "dynamic programming", "graphs", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algobook-examples = "algobook.examples:main"

[tool.setuptools.packages.find]
include = ["algobook*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
