[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mp3tagkit"
version = "0.1.0"
description = "Read and write ID3v1 and ID3v2 metadata tags in MP3 files"
requires-python = ">=3.10"
dependencies = []
keywords = ["mp3", "id3", "id3v1", "id3v2", "tags", "metadata", "audio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["mp3tagkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

[tool.ruff]
line-length = 100
target-version = "py310"
