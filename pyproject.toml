[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pipework"
version = "0.1.0"
description = "Run two commands connected by a pipe, reading from one file and writing to another"
requires-python = ">=3.10"
dependencies = []
keywords = ["pipe", "shell", "subprocess", "redirection", "strings"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pipework = "pipework.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pipework"]

[tool.pytest.ini_options]
addopts = "-ra"
