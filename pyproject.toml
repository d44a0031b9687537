[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mondrianhal"
version = "0.1.0"
description = "Tablet hardware support helpers: message queue, GNSS target detection, config files, timers, lights, input power and board properties"
requires-python = ">=3.10"
dependencies = []
keywords = ["gps", "message-queue", "sysfs", "lights", "configuration", "timer"]
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
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mondrianhal"]

[tool.pytest.ini_options]
addopts = "-ra"
