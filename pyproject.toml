[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kotoba"
version = "0.1.0"
description = "Romaji, hiragana and katakana conversion, dictionary priority tags and a streaming KANJIDIC2 parser"
requires-python = ">=3.10"
keywords = ["japanese", "romaji", "kana", "hiragana", "katakana", "kanjidic2", "dictionary"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kotoba"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
