[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ringlog"
version = "0.1.0"
description = "Asynchronous logger that queues formatted records in a bounded ring buffer and writes them from a background sink thread"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "ring-buffer", "asynchronous", "sink", "logger"]
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
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ringlog-demo = "ringlog.cli:main"
ringlog-benchmark = "ringlog.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["ringlog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
