[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "goldifri"
version = "0.1.0"
description = "Goldilocks field arithmetic, quadratic extensions and FRI query-evaluation helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["goldilocks", "finite-field", "fri", "plonk", "zero-knowledge", "polynomial-commitment"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["goldifri"]

[tool.pytest.ini_options]
addopts = "-ra"
