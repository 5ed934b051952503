[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ospfd"
version = "0.1.0"
description = "OSPF protocol toolkit and daemon skeleton: packets, LSAs, link-state database, neighbors, areas and routes"
requires-python = ">=3.10"
dependencies = []
keywords = ["ospf", "routing", "daemon", "lsa", "lsdb", "networking"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: No Input/Output (Daemon)",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ospfd = "ospfd.daemon:main"

[tool.hatch.build.targets.wheel]
packages = ["ospfd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
