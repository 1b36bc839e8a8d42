[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "protocodegen"
version = "0.13.5"
description = "Building blocks for generating code from Protocol Buffers descriptors: identifier casing, extern path resolution, comment rendering and protoc invocation."
requires-python = ">=3.10"
dependencies = []
keywords = ["protobuf", "protocol-buffers", "protoc", "code-generation", "descriptor"]
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
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["protocodegen"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
