[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "idiomkit"
version = "0.1.0"
description = "Small, self-contained programming idioms: type lists, self-registering factories, string switches, ASCII strings, parallel task graphs, error codes and more"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "idioms",
    "typelist",
    "registry",
    "factory",
    "fnv1a",
    "ascii",
    "futures",
    "error-codes",
    "weakref",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
idiomkit-compare = "idiomkit.comparable:main"
idiomkit-switch = "idiomkit.string_switch:main"
idiomkit-static-string = "idiomkit.static_string:main"
idiomkit-catalogue = "idiomkit.catalogue:main"
idiomkit-pdag = "idiomkit.pdag:main"
idiomkit-errors = "idiomkit.errors:main"
idiomkit-workers = "idiomkit.weak_worker:main"
idiomkit-fetch = "idiomkit.urlreader:main"

[tool.hatch.build.targets.wheel]
packages = ["idiomkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
