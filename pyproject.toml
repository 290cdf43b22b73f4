[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gostcrypt"
version = "0.1.0"
description = "Pure-Python GOST primitives: Streebog hashing, Kuznyechik block cipher, CTR-ACPKM style mode, Streebog HMAC and KDF, and a xoroshiro256+ style generator"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "gost",
    "streebog",
    "kuznyechik",
    "ctr-acpkm",
    "kdf",
    "hmac",
    "xoroshiro",
    "cryptography",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gostcrypt = "gostcrypt.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gostcrypt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
