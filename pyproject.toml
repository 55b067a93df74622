[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "varnavinyas"
version = "0.1.0"
description = "Nepali orthography toolkit: punctuation checks, Devanagari transliteration, legacy font decoding and tokenization"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "nepali",
    "devanagari",
    "orthography",
    "transliteration",
    "iast",
    "preeti",
    "punctuation",
    "tokenizer",
]
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
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["varnavinyas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
