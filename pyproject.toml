[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "protolint"
version = "0.1.0"
description = "Building blocks for linting Protocol Buffer files: naming checks, disable comments, auto-fixing and reporters."
requires-python = ">=3.10"
keywords = ["protobuf", "protocol-buffers", "lint", "linter", "style"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Quality Assurance",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["protolint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
