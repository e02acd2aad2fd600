[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "avantutil"
version = "0.1.0"
description = "Small server-side utilities: MIME lookup, base64, SHA-1, URL parsing, byte buffers, object pools and singletons."
requires-python = ">=3.10"
dependencies = []
keywords = ["mime", "base64", "sha1", "url", "buffer", "object-pool", "singleton", "clock"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["avantutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
