[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "observable"
version = "0.1.0"
description = "Lightweight, dependency-free predicates and assertions for writing expressive tests."
requires-python = ">=3.10"
dependencies = []
keywords = ["testing", "assertions", "predicates", "test-helpers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["observable"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
