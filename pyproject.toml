[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "payresources"
version = "0.1.0"
description = "Typed enums, union values and request parameter objects for a payments API."
requires-python = ">=3.11"
dependencies = []
keywords = ["payments", "currency", "enums", "api", "parameters"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["payresources"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
