[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "squarekit"
version = "0.1.0"
description = "Namespaces, blobs, RFC-6962 Merkle trees and proofs, and share commitment layout rules for data squares"
requires-python = ">=3.10"
dependencies = []
keywords = ["merkle", "namespace", "blob", "commitment", "rfc6962", "mountain-range"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["squarekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
