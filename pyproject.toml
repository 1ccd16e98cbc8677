[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rpsgame"
version = "1.0.0"
description = "Console rock-paper-scissors variants: lizard-spock and a seven-gesture elemental game, played to four wins."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rock-paper-scissors", "lizard", "spock", "console"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rpsgame = "rpsgame.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rpsgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
