[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toybox"
version = "0.1.0"
description = "Small programs: an append-only key-value store with an HTTP front end, an HTTP request-line parser and server, and assorted exercises"
requires-python = ">=3.10"
dependencies = []
keywords = ["key-value", "database", "http", "exercises", "append-only log"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
toybox-bank = "toybox.bank:main"
toybox-cards = "toybox.cards:main"
toybox-mars = "toybox.mars:main"
toybox-leetcode = "toybox.leetcode:main"
toybox-logs = "toybox.logs:main"
toybox-server = "toybox.server:main"
toybox-kvserver = "toybox.kvserver:main"

[tool.hatch.build.targets.wheel]
packages = ["toybox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
