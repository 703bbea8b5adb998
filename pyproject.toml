[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "liblisp"
version = "0.1.0"
description = "A tiny Lisp reader and evaluator with integers, atoms, variables and lists"
requires-python = ">=3.10"
dependencies = []
keywords = ["lisp", "interpreter", "parser", "evaluator", "s-expression"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["liblisp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
