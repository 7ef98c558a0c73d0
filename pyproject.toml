[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paddleplay"
version = "0.1.0"
description = "A single-player paddle-and-ball arcade game, with small helpers for MQTT publishing, status text and verification codes."
requires-python = ">=3.10"
keywords = ["pong", "arcade", "game", "pygame", "mqtt", "status text", "verification code"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
    "Typing :: Typed",
]
dependencies = [
    "paho-mqtt",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
paddleplay = "paddleplay.game:main"

[tool.hatch.build.targets.wheel]
packages = ["paddleplay"]

[tool.pytest.ini_options]
addopts = "-ra"
