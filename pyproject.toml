[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pestkit"
version = "0.1.0"
description = "Building blocks for hand-written PEG parsers: input positions, spans, a rewindable stack, tokens and precedence climbing."
requires-python = ">=3.10"
dependencies = []
keywords = ["parser", "peg", "parsing", "precedence-climbing", "span", "position"]
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
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pestkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
