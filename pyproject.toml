[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternlab"
version = "0.1.0"
description = "Runnable examples of classic design patterns and a generator of pattern skeleton directories"
requires-python = ">=3.10"
dependencies = []
keywords = ["design patterns", "examples", "code generator", "scaffolding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Code Generators",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternlab = "patternlab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["patternlab"]

[tool.pytest.ini_options]
addopts = "-ra"
