[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "decafc"
version = "0.1.0"
description = "Lexer, grammar analysis and LALR(1) parser generator for the Decaf teaching language"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "parser", "lalr", "decaf", "grammar"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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

[project.scripts]
decaf-lex = "decafc.lexer:main"

[tool.hatch.build.targets.wheel]
packages = ["decafc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
