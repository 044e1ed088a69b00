"""Differential operators, statistics and interpolation on FFT grids."""

from __future__ import annotations

import itertools
import math
from typing import Sequence

import numpy as np

from .grid import FFTGrid, Space


def _require_space(grid: FFTGrid, space: Space, what: str) -> None:
    if grid.space is not space:
        where = "Fourier" if space is Space.KSPACE else "real"
        raise RuntimeError(f"{what} needs the grid in {where} space")


def _k_squared(grid: FFTGrid) -> np.ndarray:
    kx, ky, kz = grid.wave_vectors()
    return kx * kx + ky * ky + kz * kz


def apply_laplacian(grid: FFTGrid) -> FFTGrid:
    """Apply the Laplacian in Fourier space; the grid is left there."""
    grid.fourier_transform_forward()
    grid.data[...] *= -_k_squared(grid)
    grid.zero_dc_mode()
    return grid


def apply_negative_laplacian(grid: FFTGrid) -> FFTGrid:
    """Apply minus the Laplacian in Fourier space; the grid is left there."""
    grid.fourier_transform_forward()
    grid.data[...] *= _k_squared(grid)
    grid.zero_dc_mode()
    return grid


def apply_inverse_laplacian(grid: FFTGrid) -> FFTGrid:
    """Apply the inverse Laplacian in Fourier space, zeroing the DC mode."""
    grid.fourier_transform_forward()
    k2 = _k_squared(grid)
    with np.errstate(divide="ignore", invalid="ignore"):
        grid.data[...] = -grid.data / k2
    grid.zero_dc_mode()
    return grid


def compute_2norm(grid: FFTGrid) -> float:
    """Mean squared modulus of the stored values."""
    data = grid.data
    return float(np.mean(data.real * data.real + data.imag * data.imag))


def grid_std(grid: FFTGrid) -> float:
    """Standard deviation: sqrt(<|x|^2> - <Re x>^2) over the stored values."""
    data = grid.data
    sum1 = float(np.mean(data.real))
    sum2 = float(np.mean(data.real * data.real + data.imag * data.imag))
    return math.sqrt(sum2 - sum1 * sum1)


def grid_mean(grid: FFTGrid) -> float:
    """Mean of the real part of the real-space values."""
    return float(np.mean(grid.data.real))


def _as_scalar(value, data: np.ndarray):
    return complex(value) if np.iscomplexobj(data) else float(value)


def get_cic(grid: FFTGrid, v: Sequence[float]):
    """Cloud-in-cell interpolation of the real-space field at position v.

    Positions are periodic in the box.
    """
    _require_space(grid, Space.RSPACE, "real-space interpolation")
    data = grid.data
    lo = []
    hi = []
    for d in range(3):
        x = math.fmod(v[d] / grid.length[d] + 1.0, 1.0) * grid.n[d]
        i = math.floor(x)
        frac = x - i
        i %= grid.n[d]
        lo.append((i, 1.0 - frac))
        hi.append(((i + 1) % grid.n[d], frac))
    val = 0.0
    for (a, wa), (b, wb), (c, wc) in itertools.product(*zip(lo, hi)):
        val += data[a, b, c] * wa * wb * wc
    return _as_scalar(val, data)


def get_cic_kspace(grid: FFTGrid, x: Sequence[float]) -> complex:
    """Cloud-in-cell interpolation of Fourier modes at fractional index x."""
    _require_space(grid, Space.KSPACE, "Fourier-space interpolation")
    data = grid.data
    ix, iy, iz = (math.floor(c) for c in x[:3])
    dx, dy, dz = x[0] - ix, x[1] - iy, x[2] - iz
    ix1 = (ix + 1) % grid.size(0)
    iy1 = (iy + 1) % grid.size(1)
    iz1 = min(iz + 1, grid.size(2) - 1)
    corners = itertools.product(
        ((ix, 1.0 - dx), (ix1, dx)),
        ((iy, 1.0 - dy), (iy1, dy)),
        ((iz, 1.0 - dz), (iz1, dz)),
    )
    val = 0.0 + 0.0j
    for (a, wa), (b, wb), (c, wc) in corners:
        val += data[a, b, c] * wa * wb * wc
    return complex(val)


def shift_field(
    grid: FFTGrid, s: Sequence[float], transform_back: bool = True
) -> FFTGrid:
    """Translate the field by s cells through a Fourier phase factor.

    The result at cell i holds the old value at cell i + s.
    """
    grid.fourier_transform_forward()
    kx, ky, kz = grid.wave_vectors()
    phase = s[0] * kx * grid.dx[0] + s[1] * ky * grid.dx[1] + s[2] * kz * grid.dx[2]
    grid.data[...] *= np.exp(1j * phase)
    if transform_back:
        grid.fourier_transform_backward()
    return grid


def dealias(grid: FFTGrid) -> FFTGrid:
    """Zero every mode whose |k| exceeds two thirds of the first-axis Nyquist."""
    _require_space(grid, Space.KSPACE, "dealiasing")
    kmax = 2.0 / 3.0 * grid.n[0] / 2 * grid.kfac[0]
    mask = np.sqrt(_k_squared(grid)) > kmax
    grid.data[np.broadcast_to(mask, grid.data.shape)] = 0.0
    return grid