"""Spherically binned power spectra of FFT grids."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from .grid import FFTGrid


@dataclass(frozen=True, eq=False)
class PowerSpectrum:
    """Binned power spectrum: mean k, power, its error and mode count per bin."""

    k: np.ndarray
    power: np.ndarray
    error: np.ndarray
    count: np.ndarray

    def __len__(self) -> int:
        return len(self.k)

    def rows(self) -> Iterator[tuple[float, float, float, int]]:
        """Yield (k, P, error, count) for every bin holding modes."""
        for k, p, e, c in zip(self.k, self.power, self.error, self.count):
            if c > 0:
                yield float(k), float(p), float(e), int(c)


def compute_power_spectrum(grid: FFTGrid) -> PowerSpectrum:
    """Bin |delta_k|^2 in shells of width k_min; the grid is left in k-space.

    Modes with k_z index above zero count twice, standing in for their
    complex conjugates.
    """
    grid.fourier_transform_forward()

    kmax = max(kf * nh for kf, nh in zip(grid.kfac, grid.nhalf))
    kmin = min(grid.kfac)
    dk = kmin
    nbins = int(kmax / kmin)

    data = grid.data
    kx, ky, kz = grid.wave_vectors()
    k = np.broadcast_to(np.sqrt(kx * kx + ky * ky + kz * kz), data.shape)
    vabs = data.real * data.real + data.imag * data.imag

    weight_z = np.full(data.shape[2], 2.0)
    weight_z[0] = 1.0
    weight = np.broadcast_to(weight_z.reshape(1, 1, -1), data.shape)

    idx = (k / dk).astype(np.int64)
    sel = (k >= kmin) & (k < kmax) & (idx < nbins)
    idx_s = idx[sel]
    w = weight[sel]
    v = vabs[sel]

    bin_count = np.rint(np.bincount(idx_s, weights=w, minlength=nbins)).astype(
        np.int64
    )
    bin_k = np.bincount(idx_s, weights=w * k[sel], minlength=nbins)
    bin_p = np.bincount(idx_s, weights=w * v, minlength=nbins)
    bin_ep = np.bincount(idx_s, weights=w * v * v, minlength=nbins)

    volfac = grid.length[0] * grid.length[1] * grid.length[2] / (2.0 * math.pi) ** 3
    fftfac = grid.fft_norm_fac * grid.fft_norm_fac

    filled = bin_count > 0
    c = bin_count[filled].astype(np.float64)
    with np.errstate(invalid="ignore", divide="ignore"):
        bin_k[filled] = bin_k[filled] / c
        p = bin_p[filled] / c * volfac * fftfac
        bin_ep[filled] = (
            np.sqrt(bin_ep[filled] / c - p * p) / np.sqrt(c) * volfac * fftfac
        )
        bin_p[filled] = p

    return PowerSpectrum(k=bin_k, power=bin_p, error=bin_ep, count=bin_count)


def write_power_spectrum(grid: FFTGrid, path: str | os.PathLike) -> PowerSpectrum:
    """Compute the power spectrum and write the filled bins as a text table."""
    spectrum = compute_power_spectrum(grid)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(
            "# "
            + "k".rjust(14)
            + "P(k)".rjust(16)
            + "err. P(k)".rjust(16)
            + "#modes".rjust(16)
            + "\n"
        )
        for k, p, e, c in spectrum.rows():
            fh.write(f"{k:>16g}{p:>16g}{e:>16g}{c:>16d}\n")
    return spectrum