[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mpscan"
version = "0.1.0"
description = "Concurrent TCP port scanner with banner grabbing and JSON summaries"
requires-python = ">=3.10"
dependencies = [
    "tqdm",
]
keywords = ["port scanner", "tcp", "networking", "banner grabbing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mpscan = "mpscan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mpscan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
