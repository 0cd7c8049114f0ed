[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oratypes"
version = "0.1.0"
description = "Oracle SQL data types in pure Python: timestamps, intervals, type descriptors and conversions"
requires-python = ">=3.10"
dependencies = []
keywords = ["oracle", "sql", "timestamp", "interval", "database", "types"]
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
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["oratypes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
