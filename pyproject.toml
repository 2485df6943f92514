[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "odbckit"
version = "0.1.0"
description = "SQL value types, text helpers, ODBC type tables and parameter buffers"
requires-python = ">=3.10"
dependencies = []
keywords = ["odbc", "sql", "decimal", "utf-16", "database", "parameters"]
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
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["odbckit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
