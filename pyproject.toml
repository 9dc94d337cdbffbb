[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nukeshield"
version = "0.1.0"
description = "Detection core for a chat-server anti-nuke guard: safety modes, thresholds, guild profiles, settings, alert queues, per-guild tables, command definitions and system statistics."
requires-python = ">=3.10"
keywords = ["anti-nuke", "moderation", "chat", "guild", "rate-limit", "security"]
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
    "Topic :: Communications :: Chat",
    "Topic :: Security",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["nukeshield"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
