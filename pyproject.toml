[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fourierviz"
version = "0.1.0"
description = "Live audio spectrum visualizer with its own FFT, DFT and WAV streaming"
requires-python = ">=3.10"
keywords = ["fft", "dft", "audio", "spectrum", "visualizer", "wav"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fourierviz = "fourierviz.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fourierviz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
