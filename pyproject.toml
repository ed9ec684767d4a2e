[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "citatnik"
version = "0.1.0"
description = "A small HTTP service that keeps quotes in memory and serves them through a JSON API"
requires-python = ">=3.10"
keywords = ["quotes", "http", "wsgi", "json", "in-memory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]
dependencies = [
    "werkzeug",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
citatnik = "citatnik.app:main"

[tool.hatch.build.targets.wheel]
packages = ["citatnik"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
