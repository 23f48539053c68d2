[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kdiff"
version = "0.1.0"
description = "Compare Kubernetes pod resource requests or limits against actual usage"
requires-python = ">=3.10"
keywords = ["kubernetes", "metrics", "resources", "requests", "limits", "monitoring"]
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
    "Topic :: System :: Monitoring",
]
dependencies = [
    "requests",
    "pyyaml",
    "tabulate",
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
kdiff = "kdiff.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kdiff"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
