[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shellhist"
version = "0.1.0"
description = "Shell history tools: command statistics, search ranking, line editing, duration formatting and shell completions"
requires-python = ">=3.10"
keywords = ["shell", "history", "statistics", "search", "terminal", "completion"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Utilities",
]
dependencies = [
    "regex",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
shellhist = "shellhist.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["shellhist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
