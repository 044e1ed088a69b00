[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cosmogrid"
version = "0.1.0"
description = "Periodic FFT grids, field statistics, power spectra and cosmological parameter presets"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["cosmology", "fft", "grid", "power spectrum", "density pdf"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Astronomy",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cosmogrid"]

[tool.pytest.ini_options]
addopts = "-ra"
