[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "archidoc"
version = "0.3.0"
description = "Generate C4 architecture documentation and diagrams from module documentation"
requires-python = ">=3.10"
dependencies = []
keywords = ["c4-model", "architecture", "documentation", "mermaid", "plantuml", "drawio", "diagrams"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Documentation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["archidoc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
