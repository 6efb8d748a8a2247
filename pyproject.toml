[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "amqpwire"
version = "0.1.0"
description = "AMQP 0-9-1 client building blocks: frame parsing and serialization, channel allocation, heartbeats and content assembly"
requires-python = ">=3.10"
dependencies = []
keywords = ["amqp", "amqp-0-9-1", "rabbitmq", "messaging", "protocol", "frames"]
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
    "Topic :: System :: Networking",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["amqpwire"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
