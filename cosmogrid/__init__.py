"""Periodic FFT grids, field operations, spectra and cosmology presets."""

__version__ = "0.1.0"

__all__ = [
    "cosmology_parameters",
    "fields",
    "grid",
    "grid_ops",
    "interpolation",
    "pdf",
    "physical_constants",
    "spectra",
    "system_stat",
    "vec",
]