[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "padlights"
version = "0.1.0"
description = "Gamepad LED animations, flash-backed settings cache, I2C device helpers and USB report layouts for arcade controllers"
requires-python = ">=3.10"
dependencies = []
keywords = ["gamepad", "led", "animation", "neopixel", "i2c", "ads1219", "hid", "crc32", "eeprom"]
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
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["padlights"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
