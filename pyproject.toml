[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "n8lang"
version = "1.0.0"
description = "Tokenizer, parser and support utilities for the N8 programming language"
requires-python = ">=3.10"
dependencies = []
keywords = ["n8", "lexer", "tokenizer", "parser", "ast", "programming-language"]
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
    "Topic :: Software Development :: Interpreters",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["n8lang"]

[tool.hatch.build.targets.sdist]
include = ["n8lang", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
