[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toychain"
version = "0.1.0"
description = "A small educational blockchain with a pure-Python SHA-256, simple data blocks and a transaction ledger"
requires-python = ">=3.10"
dependencies = []
keywords = ["blockchain", "sha256", "hashing", "ledger", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
toychain-simple = "toychain.simple_demo:main"
toychain-ledger = "toychain.ledger_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["toychain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
