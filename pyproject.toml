[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "compilerlab"
version = "0.1.0"
description = "Small compiler-construction exercises: FIRST/FOLLOW sets, a lexer, recursive descent parsers and an activation-record stack."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "compiler",
    "lexer",
    "parser",
    "recursive-descent",
    "first-set",
    "follow-set",
    "grammar",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
compilerlab-first = "compilerlab.first_sets:main"
compilerlab-follow = "compilerlab.follow_sets:main"
compilerlab-lex = "compilerlab.lexer:main"
compilerlab-stack = "compilerlab.stack_alloc:main"
compilerlab-backtrack = "compilerlab.backtracking_parser:main"
compilerlab-expr = "compilerlab.expr_parser:main"
compilerlab-list = "compilerlab.list_parser:main"

[tool.hatch.build.targets.wheel]
packages = ["compilerlab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
