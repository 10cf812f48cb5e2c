[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "assistwire"
version = "0.1.0"
description = "Request builders, response models and a server-sent-event stream reader for assistant-style HTTP APIs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "api",
    "assistants",
    "threads",
    "runs",
    "vector-stores",
    "moderation",
    "text-to-speech",
    "server-sent-events",
    "rate-limit",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Internet :: WWW/HTTP",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["assistwire"]

[tool.hatch.build.targets.sdist]
include = ["assistwire", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
