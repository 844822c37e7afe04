[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minicfront"
version = "1.0.1"
description = "MiniC language front-end pieces: tokenizer, expression parser, syntax tree classes and abstract syntax tree nodes"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "front-end", "lexer", "parser", "syntax tree", "minic"]
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
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minicfront"]

[tool.hatch.build.targets.sdist]
include = ["minicfront", "tests", "README.md", "pyproject.toml"]

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
warn_redundant_casts = true
