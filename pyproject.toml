[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coranker"
version = "0.1.0"
description = "Small search engine with an inverted index, an LRU query cache and PageRank over a co-relevance graph"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "search",
    "inverted-index",
    "pagerank",
    "lru-cache",
    "information-retrieval",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coranker = "coranker.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["coranker"]

[tool.hatch.build.targets.sdist]
include = ["coranker", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
