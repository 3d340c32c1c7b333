[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "binlogsrv"
version = "0.1.0"
description = "Binlog storage, storage backends and helpers for a MySQL binary log server"
requires-python = ">=3.10"
dependencies = []
keywords = ["mysql", "binlog", "replication", "storage"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["binlogsrv"]

[tool.pytest.ini_options]
addopts = "-ra"
