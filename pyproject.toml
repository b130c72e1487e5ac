[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mariakit"
version = "0.1.0"
description = "Typed result sets, prepared statements, transactions and time values over MariaDB/MySQL DB-API connections"
requires-python = ">=3.10"
dependencies = []
keywords = ["mariadb", "mysql", "database", "prepared-statement", "transaction", "result-set"]
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
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mariakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
