[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shellguard"
version = "0.1.0"
description = "Policy checks for shell commands: allow and deny lists, subcommand rules, path confinement and output limits"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "security", "sandbox", "command validation", "policy"]
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
    "Topic :: Security",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shellguard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
