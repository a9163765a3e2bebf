[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "microserver"
version = "0.1.0"
description = "A tiny UDP command server that runs small scripts controlling an LED state"
requires-python = ">=3.10"
keywords = ["udp", "server", "led", "interpreter", "commands"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
microserver = "microserver.server:main"

[tool.hatch.build.targets.wheel]
packages = ["microserver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
