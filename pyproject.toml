[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brickfall"
version = "0.1.0"
description = "A small brick-breaking arcade game with a paddle, a bouncing ball and staged block fields"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "breakout", "bricks", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
brickfall = "brickfall.app:main"

[tool.hatch.build.targets.wheel]
packages = ["brickfall"]

[tool.pytest.ini_options]
addopts = "-ra"
