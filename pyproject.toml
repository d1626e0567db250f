[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iterplus"
version = "0.1.0"
description = "Extra iterator adaptors and helpers: lazy grouping and chunking, k-way merge, intersperse, k-smallest and group-and-fold maps."
requires-python = ">=3.10"
dependencies = []
keywords = ["iterator", "itertools", "group-by", "merge", "chunks", "generators"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["iterplus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
