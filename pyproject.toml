[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "concrete-utils"
version = "0.0.12"
description = "Small foundational utilities: integer math helpers, byte order handling, scope guards, type-dispatched customization points, intrusive reference counting, data-defined status codes and UUID values."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "utilities",
    "byteswap",
    "endianness",
    "scope-guard",
    "reference-counting",
    "status-code",
    "uuid",
]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["concrete_utils"]

[tool.hatch.build.targets.sdist]
include = ["concrete_utils", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
