[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternbook"
version = "0.1.0"
description = "Small, runnable examples of the classic creational and structural design patterns"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design patterns",
    "creational",
    "structural",
    "education",
    "examples",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternbook-abstract-factory = "patternbook.abstract_factory:main"
patternbook-builder = "patternbook.builder:main"
patternbook-factory-method = "patternbook.factory_method:main"
patternbook-prototype = "patternbook.prototype:main"
patternbook-simple-factory = "patternbook.simple_factory:main"
patternbook-singleton = "patternbook.singleton:main"
patternbook-adapter = "patternbook.adapter:main"
patternbook-bridge = "patternbook.bridge:main"
patternbook-decorator = "patternbook.decorator:main"
patternbook-facade = "patternbook.facade:main"
patternbook-flyweight = "patternbook.flyweight:main"
patternbook-proxy = "patternbook.proxy:main"

[tool.hatch.build.targets.wheel]
packages = ["patternbook"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
