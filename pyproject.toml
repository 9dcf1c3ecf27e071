[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xeniria"
version = "0.2.0"
description = "Building blocks for a Markdown blog: site configuration, front-matter parsing with image sizing, and a local preview server"
requires-python = ">=3.11"
keywords = ["static-site", "blog", "markdown", "front-matter", "preview-server"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Site Management",
    "Topic :: Text Processing :: Markup :: Markdown",
]
dependencies = [
    "mistune",
    "pyyaml",
    "python-slugify",
    "pillow",
    "requests",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xeniria"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
