[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tavernkeep"
version = "0.1.0"
description = "Role-playing characters, character classes and a tavern that keeps track of who is inside"
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "role-playing", "characters", "tavern", "bag"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tavernkeep-demo = "tavernkeep.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["tavernkeep"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
