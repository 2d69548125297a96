[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ogen"
version = "0.1.0"
description = "Building blocks for an OpenAPI code generator: a fluent document builder, parameter value converters, feature sets, content-type filtering and generator errors."
requires-python = ">=3.10"
dependencies = []
keywords = ["openapi", "oas", "code-generation", "json-schema", "api"]
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
packages = ["ogen"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
