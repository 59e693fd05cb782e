[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bucketlist"
version = "0.1.0"
description = "A small web application that shows a holiday bucket list of places on maps"
requires-python = ">=3.10"
dependencies = []
keywords = ["bucket-list", "holiday", "travel", "wsgi", "sqlite", "leaflet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bucketlist = "bucketlist.server:main"

[tool.hatch.build.targets.wheel]
packages = ["bucketlist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
