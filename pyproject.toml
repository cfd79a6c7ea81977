[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rpg-framework"
version = "0.1.0"
description = "A small role-playing game framework: world regions, portals, players, items, quests, SQLite storage and a Flask web API."
requires-python = ">=3.11"
keywords = ["rpg", "game", "dungeon", "procedural generation", "flask", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "tomli-w",
    "python-dotenv",
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rpg-framework = "rpg_framework.app:main"

[tool.hatch.build.targets.wheel]
packages = ["rpg_framework"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
