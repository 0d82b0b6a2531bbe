[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boggleht"
version = "0.1.0"
description = "Open-addressing hash table with linear and double-hash probing, a base-36 string hash, and a straight-line Boggle word finder"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash table", "open addressing", "double hashing", "string hash", "boggle", "word search", "mersenne twister"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
boggle-driver = "boggleht.boggle:main"
str-hash = "boggleht.strhash:main"
ht-demo = "boggleht.hashtable:main"

[tool.hatch.build.targets.wheel]
packages = ["boggleht"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
