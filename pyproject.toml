[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "beelog"
version = "0.1.0"
description = "Severity-filtered logging with rolling files and text/CSV formatters, plus helpers for binary decoding, files and INI settings"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "rolling-file", "csv", "formatter", "binary", "ini"]
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
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["beelog*"]

[tool.pytest.ini_options]
addopts = "-ra"
