[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "metagems"
version = "0.1.0"
description = "Small reflection and formatting helpers: enum lookup, structured streaming, RPN evaluation, variants and type erasure"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "reflection",
    "enums",
    "serialization",
    "formatting",
    "rpn",
    "variant",
    "type-erasure",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
metagems-enums = "metagems.enums:main"
metagems-fibonacci = "metagems.fibonacci:main"
metagems-series = "metagems.series:main"
metagems-rpn = "metagems.rpn:main"
metagems-dispatch = "metagems.dispatch:main"
metagems-version = "metagems.shell:print_version"

[tool.setuptools.packages.find]
include = ["metagems*"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
