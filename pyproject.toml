[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mybasic"
version = "0.1.0"
description = "A small BASIC dialect compiler that emits register-machine assembly"
requires-python = ">=3.10"
dependencies = []
keywords = ["basic", "compiler", "assembly", "code generation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mybasic = "mybasic.compiler:main"

[tool.hatch.build.targets.wheel]
packages = ["mybasic"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
