[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "octype"
version = "0.1.0"
description = "A small object model with a type registry, reference counting and type-aware equality."
requires-python = ">=3.10"
dependencies = []
keywords = ["types", "registry", "reference counting", "object model"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["octype"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
