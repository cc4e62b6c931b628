[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocketcalc"
version = "0.1.0"
description = "A collection of small console calculators, checkers and games for learning programming basics."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "calculator",
    "education",
    "geometry",
    "converter",
    "number-theory",
    "console",
    "games",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Games/Entertainment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pocketcalc"]

[tool.hatch.build.targets.sdist]
include = ["pocketcalc", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
