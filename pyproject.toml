[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aorta"
version = "0.1.0"
description = "Building blocks of an interactive command shell: built-in commands, history, aliases, completion and highlighting"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "history", "aliases", "completion"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aorta"]

[tool.pytest.ini_options]
addopts = "-ra"
