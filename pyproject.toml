[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pipex"
version = "0.1.0"
description = "Run two commands joined by a pipe, reading from one file and writing to another"
requires-python = ">=3.10"
dependencies = []
keywords = ["pipe", "shell", "pipeline", "subprocess", "redirection"]
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
pipex = "pipex.pipeline:main"

[tool.hatch.build.targets.wheel]
packages = ["pipex"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
