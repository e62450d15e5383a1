[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iqtqueue"
version = "0.1.0"
description = "A priority, FIFO and FILO queue of tagged task items with duplicate detection and lookup by task id or key."
requires-python = ">=3.10"
dependencies = []
keywords = ["queue", "priority-queue", "fifo", "filo", "gameplay-tags", "tasks"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["iqtqueue"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
