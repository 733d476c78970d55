[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seqwrap"
version = "0.1.0"
description = "32-bit wrapping sequence numbers relative to an initial sequence number, as used by TCP"
requires-python = ">=3.10"
dependencies = []
keywords = ["tcp", "sequence number", "wrapping", "isn", "networking"]
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
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["seqwrap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
