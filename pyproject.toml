[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bls_scalar"
version = "0.1.0"
description = "Arithmetic in the BLS12-381 scalar field: Montgomery-form elements, encoding, square roots and hashing to the field."
requires-python = ">=3.10"
dependencies = []
keywords = ["bls12-381", "finite-field", "scalar", "montgomery", "cryptography", "pairing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
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
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["bls_scalar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
