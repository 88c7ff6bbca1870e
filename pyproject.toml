[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "avaliador"
version = "0.1.0"
description = "Numeric expression evaluator: infix/postfix conversion and evaluation with special functions"
requires-python = ">=3.10"
dependencies = []
keywords = ["expression", "infix", "postfix", "rpn", "calculator", "shunting-yard"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
avaliador = "avaliador.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["avaliador"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
