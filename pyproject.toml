[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "normabm"
version = "0.1.0"
description = "Agent-based model of social norm formation with conformity and nonconformity responses"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "agent-based model",
    "opinion dynamics",
    "social norms",
    "conformity",
    "nonconformity",
    "monte carlo",
    "simulation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Topic :: Sociology",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
normabm = "normabm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["normabm"]

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
warn_unused_ignores = true
warn_redundant_casts = true
