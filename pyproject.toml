[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trantorkit"
version = "1.5.26"
description = "Utilities for networked services: time points and date parsing, log text assembly, message buffers, object pools, encoding and hashing helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["date", "buffer", "object-pool", "hashing", "utf-8", "utilities"]
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
packages = ["trantorkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
