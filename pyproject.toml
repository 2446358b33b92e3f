[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "viengine"
version = "0.1.0"
description = "Building blocks of a small game engine: events, input state, entity ids, frame timing, memory accounting allocators, object pools, a deferred render command queue and GLSL file parsing."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "game-engine",
    "events",
    "input",
    "allocators",
    "memory",
    "object-pool",
    "render-queue",
    "glsl",
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["viengine"]

[tool.hatch.build.targets.sdist]
include = ["viengine", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
