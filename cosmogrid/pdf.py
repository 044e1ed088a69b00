"""Histograms of the one-point distribution of a real-space field."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from .grid import FFTGrid, Space


@dataclass(frozen=True, eq=False)
class DensityPDF:
    """Logarithmically binned probability density of field values.

    ``rho`` holds the geometric bin centres, ``width`` the bin widths,
    ``pdf`` the density of |x| and ``scaled_pdf`` the density of
    ``(|x| - 1) * scale + 1``, both per unit value and per cell.
    """

    rho: np.ndarray
    width: np.ndarray
    pdf: np.ndarray
    scaled_pdf: np.ndarray

    def __len__(self) -> int:
        return len(self.rho)

    def rows(self) -> Iterator[tuple[float, float, float]]:
        """Yield (rho, pdf, scaled pdf) for every bin."""
        for r, p, s in zip(self.rho, self.pdf, self.scaled_pdf):
            yield float(r), float(p), float(s)


def _histogram(positions: np.ndarray, nbins: int) -> np.ndarray:
    """Count fractional bin positions, truncating them toward zero."""
    finite = positions[np.isfinite(positions)]
    ibin = np.trunc(finite)
    ibin = ibin[(ibin >= 0) & (ibin < nbins)].astype(np.int64)
    return np.bincount(ibin, minlength=nbins).astype(np.float64)


def density_pdf(
    grid: FFTGrid,
    nbins: int = 1000,
    scale: float = 1.0,
    rhomin: float = 1e-3,
    rhomax: float = 1e3,
) -> DensityPDF:
    """Bin |x| of every real-space cell in nbins logarithmic bins.

    Values outside [rhomin, rhomax), as well as zeros and values whose
    scaled counterpart is not positive, are not counted.
    """
    if grid.space is not Space.RSPACE:
        raise RuntimeError("a density PDF needs the grid in real space")
    nbins = int(nbins)
    if nbins <= 0:
        raise ValueError(f"number of bins must be positive, got {nbins}")
    if not rhomin > 0.0 or not rhomax > rhomin:
        raise ValueError(
            f"need 0 < rhomin < rhomax, got rhomin={rhomin}, rhomax={rhomax}"
        )

    logvmin = math.log10(rhomin)
    logvmax = math.log10(rhomax)
    idv = nbins / (logvmax - logvmin)

    values = np.abs(grid.data).ravel()
    with np.errstate(divide="ignore", invalid="ignore"):
        plain = (np.log10(values) - logvmin) * idv
        scaled = (np.log10((values - 1.0) * scale + 1.0) - logvmin) * idv

    count = _histogram(plain, nbins)
    scount = _histogram(scaled, nbins)

    ibins = np.arange(nbins, dtype=np.float64)
    rho = np.power(10.0, logvmin + (ibins + 0.5) / idv)
    width = np.power(10.0, logvmin + (ibins + 1.0) / idv) - np.power(
        10.0, logvmin + ibins / idv
    )
    numcells = grid.size(0) * grid.size(1) * grid.size(2)

    return DensityPDF(
        rho=rho,
        width=width,
        pdf=count / width / numcells,
        scaled_pdf=scount / width / numcells,
    )


def write_pdf(
    grid: FFTGrid,
    path: str | os.PathLike,
    nbins: int = 1000,
    scale: float = 1.0,
    rhomin: float = 1e-3,
    rhomax: float = 1e3,
) -> DensityPDF:
    """Compute the density PDF and write every bin as a text table."""
    result = density_pdf(grid, nbins, scale, rhomin, rhomax)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(
            "# "
            + "rho".rjust(14)
            + "d rho / dV".rjust(16)
            + "d (rho/D+) / dV".rjust(16)
            + "\n"
        )
        for r, p, s in result.rows():
            fh.write(f"{r:>16g}{p:>16g}{s:>16g}\n")
    return result