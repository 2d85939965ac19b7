[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "opcuadiag"
version = "0.1.0"
description = "Panel state and logic for a read-only OPC-UA diagnostic and monitoring tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["opc-ua", "opcua", "diagnostics", "monitoring", "status-codes", "watchlist"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["opcuadiag"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
