[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tstypegen"
version = "0.1.0"
description = "Turn Rust type expressions into TypeScript type annotations."
requires-python = ">=3.10"
dependencies = []
keywords = ["typescript", "rust", "types", "code generation", "serde"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
packages = ["tstypegen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
