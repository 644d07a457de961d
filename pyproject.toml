[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "docsearch"
version = "0.1.0"
description = "In-memory TF-IDF document search server with stop words, minus words and request statistics"
requires-python = ">=3.10"
dependencies = []
keywords = ["search", "tf-idf", "inverted-index", "full-text", "ranking"]
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
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
docsearch-demo = "docsearch.main:main"

[tool.hatch.build.targets.wheel]
packages = ["docsearch"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
