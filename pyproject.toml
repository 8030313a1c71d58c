[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "canyonsql"
version = "0.1.0"
description = "SQL statement building, parameter binding and entity metadata for PostgreSQL, SQL Server and MySQL datasources"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sql",
    "query-builder",
    "postgresql",
    "sqlserver",
    "mysql",
    "crud",
    "entities",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["canyonsql"]

[tool.hatch.build.targets.sdist]
include = [
    "canyonsql",
    "tests",
    "pyproject.toml",
    "README.md",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
