[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algodrills"
version = "0.1.0"
description = "Classic array, matrix and text-pattern exercises as small, tested Python functions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "arrays",
    "matrix",
    "patterns",
    "practice",
    "two-pointers",
    "kadane",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algodrills-patterns = "algodrills.patterns:main"

[tool.hatch.build.targets.wheel]
packages = ["algodrills"]

[tool.hatch.build.targets.sdist]
include = ["algodrills", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["algodrills"]
