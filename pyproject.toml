[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dogewallet"
version = "1.0.0"
description = "Wallet logic for a CryptoNote-style coin: settings, amounts, send form, transaction history and status text."
requires-python = ">=3.10"
dependencies = []
keywords = ["wallet", "cryptocurrency", "walletd", "settings", "transaction-history"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dogewallet"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
