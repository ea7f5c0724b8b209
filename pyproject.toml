[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "accessrules"
version = "0.1.0"
description = "Building blocks for model-driven access control: model config parsing, policy effect merging, enforce contexts, matcher parameters and decision cache keys."
requires-python = ">=3.10"
dependencies = []
keywords = ["access-control", "authorization", "rbac", "abac", "policy", "acl"]
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
    "Topic :: Security",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["accessrules"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
