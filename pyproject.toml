[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "barutil"
version = "0.1.0"
description = "Building blocks for status bars: text helpers, unit formatting, i3/sway IPC framing, rfkill events, shell commands, worker threads, signals and status records"
requires-python = ">=3.10"
dependencies = []
keywords = ["status bar", "sway", "i3", "ipc", "rfkill", "wayland", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["barutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
