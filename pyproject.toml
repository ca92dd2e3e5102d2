[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "picosynth"
version = "0.1.0"
description = "Record-and-play audio state machine with an SSD1306 OLED framebuffer, driven through pluggable hardware interfaces"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "recording", "playback", "ssd1306", "oled", "framebuffer", "dsp", "i2c"]
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
    "Topic :: Multimedia :: Sound/Audio :: Capture/Recording",
    "Topic :: Multimedia :: Graphics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["picosynth"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
