[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "modelgen"
version = "0.1.0"
description = "Generate Dart model classes and message codecs from .def model definitions"
requires-python = ">=3.10"
dependencies = []
keywords = ["code generation", "models", "codecs", "dart", "schema", "parser"]
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
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["modelgen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
