[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enetlite"
version = "0.4.0"
description = "Building blocks of the ENet reliable UDP protocol: addresses, packets, events, intrusive lists, host randomness and the adaptive range coder."
requires-python = ">=3.10"
dependencies = []
keywords = ["enet", "udp", "networking", "range-coder", "compression"]
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
    "Topic :: System :: Networking",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["enetlite"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
