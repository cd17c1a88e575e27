[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cade6502"
version = "0.1.0"
description = "Lexer for 6502 assembly source files"
requires-python = ">=3.10"
dependencies = []
keywords = ["6502", "assembly", "lexer", "tokenizer", "assembler"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Assemblers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cade6502 = "cade6502.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cade6502"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
