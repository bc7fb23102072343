[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tclib"
version = "0.1.0"
description = "Small utility library: string helpers, random generators, byte-stream I/O, run-length compression, a tiny pattern matcher, nano IDs and WAV writing"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "utilities",
    "strings",
    "random",
    "mersenne-twister",
    "nanoid",
    "wav",
    "run-length",
    "pattern-matching",
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tclib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
