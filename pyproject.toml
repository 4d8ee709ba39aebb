[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cedis"
version = "0.1.0"
description = "A small Redis-style TCP server that accepts one client and answers one command"
requires-python = ">=3.10"
dependencies = []
keywords = ["redis", "resp", "server", "tcp"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
cedis = "cedis.server:main"

[tool.hatch.build.targets.wheel]
packages = ["cedis"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
