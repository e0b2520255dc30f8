[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "docsearch"
version = "0.1.0"
description = "A small full-text search engine over local text documents, driven by JSON configuration and request files."
requires-python = ">=3.10"
dependencies = []
keywords = ["search", "inverted index", "full-text", "relevance", "json"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
docsearch = "docsearch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["docsearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
