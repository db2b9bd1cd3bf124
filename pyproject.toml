[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dnsdecode"
version = "0.1.0"
description = "Strict decoder for DNS wire-format messages, resource records and EDNS options"
requires-python = ">=3.10"
dependencies = []
keywords = ["dns", "decoder", "wire-format", "edns", "parser"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Name Service (DNS)",
]

[project.optional-dependencies]
test = [
    "pytest",
    "dnspython",
]

[tool.hatch.build.targets.wheel]
packages = ["dnsdecode"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
