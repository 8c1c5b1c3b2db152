[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vsftpcore"
version = "0.1.0"
description = "Building blocks for an FTP server: ASCII-mode conversion, data transfers, strict address parsing, bounded network reads and capped file loading"
requires-python = ">=3.10"
dependencies = []
keywords = ["ftp", "ftpd", "ascii-mode", "data-transfer", "ip-address", "parsing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: File Transfer Protocol (FTP)",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vsftpcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
