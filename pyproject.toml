[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cengaver"
version = "0.1.0"
description = "A tile-based side-scrolling platform game with patrolling, hopping and ramming enemies."
requires-python = ">=3.10"
keywords = ["game", "platformer", "side-scroller", "pygame", "tiles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cengaver = "cengaver.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cengaver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
