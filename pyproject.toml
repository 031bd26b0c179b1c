[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advcache"
version = "0.1.0"
description = "Building blocks for an HTTP response cache: cache-key material, payload and entry encoding, refresh policy, metrics, rate limiting, graceful shutdown and locale tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["cache", "http", "cache-key", "prometheus", "rate-limit", "locale"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["advcache"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
