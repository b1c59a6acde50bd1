[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sensorlink"
version = "0.1.0"
description = "Temperature reporting client that sends readings to a server over TCP or TLS and obeys its commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["temperature", "sensor", "telemetry", "tcp", "tls", "monitoring"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
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

[project.scripts]
sensorlink = "sensorlink.client:main"

[tool.hatch.build.targets.wheel]
packages = ["sensorlink"]

[tool.pytest.ini_options]
addopts = "-ra"
