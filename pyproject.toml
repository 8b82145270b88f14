[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "judgekit"
version = "1.0.0"
description = "Solutions to short competitive-programming exercises, usable as functions or as judge-style commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "algorithms", "exercises", "binary-tree", "dynamic-programming"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
judgekit-numeric = "judgekit.numeric:main"
judgekit-verdicts = "judgekit.verdicts:main"
judgekit-arrays = "judgekit.arrays:main"
judgekit-textual = "judgekit.textual:main"

[tool.hatch.build.targets.wheel]
packages = ["judgekit"]

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
