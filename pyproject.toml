[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "savewatch"
version = "1.0.0"
description = "Watch a game's save folder and keep dated copies of every save, reading the in-game date from the screen"
requires-python = ">=3.10"
keywords = ["savegame", "backup", "ocr", "bk-tree", "levenshtein", "bitmap", "voronoi"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: System :: Archiving :: Backup",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
savewatch = "savewatch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["savewatch"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
