# cosmogrid

A library for periodic three-dimensional fields of the kind used in
cosmological simulations: grids that switch between real and Fourier space,
element-wise field operations, Laplacian operators, Fourier interpolation
between resolutions, binned power spectra and density PDFs. It also carries
Planck 2018 cosmological parameter presets, SI physical constants and a few
helpers that report CPU, memory and kernel information.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Quick start

```python
import numpy as np

from cosmogrid.grid import FFTGrid
from cosmogrid.grid_ops import apply_inverse_laplacian, grid_std
from cosmogrid.spectra import compute_power_spectrum, write_power_spectrum

grid = FFTGrid((32, 32, 32), (100.0, 100.0, 100.0))
grid.data[...] = np.random.default_rng(1).standard_normal(grid.data.shape)

apply_inverse_laplacian(grid)        # leaves the grid in Fourier space
grid.fourier_transform_backward()
print(grid_std(grid))

spectrum = compute_power_spectrum(grid)   # leaves the grid in Fourier space
for k, p, err, count in spectrum.rows():
    print(k, p, err, count)
write_power_spectrum(grid, "powerspec.txt")
```

## Grids

`FFTGrid(n, length, allocate=True, space=Space.RSPACE, complex_data=False)`
holds one buffer that is viewed either as a real-space array of shape
`(n0, n1, n2)` or as its Fourier representation. Real fields use the
half-complex layout, so their Fourier view has shape `(n0, n1, n2 // 2 + 1)`;
with `complex_data=True` both views are full complex arrays.

- `grid.data` is a writable NumPy view of the current representation and
  `grid.space` tells which one it is (`Space.RSPACE` or `Space.KSPACE`).
- `fourier_transform_forward()` and `fourier_transform_backward()` switch
  space; both directions are scaled by `1 / sqrt(N)`. Pass `False` to switch
  the label without transforming.
- `get_k`, `wave_vectors`, `get_r`, `get_unit_r`, `get_unit_r_shifted`,
  `get_cell_idx_1d`, `is_nyquist_mode`, `gradient` and `laplacian` give
  positions, wave vectors and Fourier-space operators.
- `zero_dc_mode()` removes the mean; `zero()`, `copy_from()`, `apply_norm()`,
  `*=` and `/=` act on the stored data.

## Other modules

- `cosmogrid.fields` – `apply_function_k/r`, `apply_function_k_dep/r_dep` and
  `assign_function_of_grids_r/k/ijk/kdep`. The function is called once with
  whole arrays, so it must work element-wise through NumPy broadcasting.
- `cosmogrid.grid_ops` – `apply_laplacian`, `apply_negative_laplacian`,
  `apply_inverse_laplacian`, `compute_2norm`, `grid_std`, `grid_mean`,
  cloud-in-cell sampling (`get_cic`, `get_cic_kspace`), `shift_field` and
  `dealias`.
- `cosmogrid.interpolation` – `fourier_interpolate_copy(source, target)`
  copies between grids of different sizes, keeping only the modes both share.
- `cosmogrid.spectra` – `compute_power_spectrum` returns a `PowerSpectrum`;
  `write_power_spectrum` also writes the filled bins as a text table.
- `cosmogrid.pdf` – `density_pdf` returns a `DensityPDF` of logarithmically
  binned `|x|`; `write_pdf` also writes it as a text table.
- `cosmogrid.vec` – `Vec`, a small mutable vector with element-wise
  arithmetic, `abs()`, `norm()` and `norm_squared()`.
- `cosmogrid.cosmology_parameters` – `available_sets()`,
  `get_parameter_set(name)` and `print_parameter_sets(stream)` for the
  Planck 2018 presets.
- `cosmogrid.physical_constants` – SI constants and unit conversions, with
  `stefan_boltzmann_constant()` and `critical_density()`.
- `cosmogrid.system_stat` – `cpu_string`, `memory_statistics`, `kernel_info`
  and the parsers `parse_cpuinfo`, `parse_meminfo`, `parse_kernel_release`.

## What it does not do

cosmogrid is a library of building blocks. It does not generate initial
conditions: it has no random-field generator, no transfer functions or growth
factors, no perturbation-theory driver and no particle output. It has no
command-line program, does not read or write HDF5 files, and works on a
single process only, with no distributed grids.