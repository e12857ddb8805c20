[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wifinl"
version = "0.1.0"
description = "Encode and decode nl80211 netlink attributes for Linux wireless devices"
requires-python = ">=3.10"
dependencies = []
keywords = ["nl80211", "netlink", "wifi", "wireless", "802.11"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["wifinl"]

[tool.pytest.ini_options]
addopts = "-ra"
