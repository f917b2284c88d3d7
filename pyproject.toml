[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockhop"
version = "0.1.0"
description = "A small side-scrolling platformer with a tiny tick/render engine built on pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "platformer", "pygame", "side-scroller", "arcade"]
classifiers = [
    "Development Status :: 3 - Alpha",
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

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
blockhop = "blockhop.main:main"

[tool.hatch.build.targets.wheel]
packages = ["blockhop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
