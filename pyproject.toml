[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nacos-kit"
version = "0.1.0"
description = "Data models, request parameters, UUID tools and small utilities for service discovery and configuration clients"
requires-python = ">=3.10"
dependencies = []
keywords = ["service-discovery", "configuration", "uuid", "rfc4122", "dataclasses"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nacos_kit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
