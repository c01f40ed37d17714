[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stlkit"
version = "0.1.0"
description = "Small container utilities: value lookup, bounded spans and an iterable stack"
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "stack", "span", "search", "collections"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stlkit-easyfind = "stlkit.easyfind:main"
stlkit-span = "stlkit.span:main"
stlkit-stack = "stlkit.mutant_stack:main"

[tool.hatch.build.targets.wheel]
packages = ["stlkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
