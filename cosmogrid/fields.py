"""Apply functions over whole grids, elementwise.

Every function here calls ``f`` once with whole NumPy arrays rather than
once per cell, so ``f`` must work elementwise through NumPy broadcasting.
Wave vectors and positions are passed as vectors whose three components
are arrays of the grid's current shape. Their ``norm()`` and ``abs()``
work on arrays as well.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from .grid import FFTGrid
from .vec import Vec


class _FieldVec(Vec):
    """A vector whose components are arrays of one shape."""

    __slots__ = ()

    def norm(self):
        return np.sqrt(self.norm_squared())

    def abs(self):
        return _FieldVec(np.abs(a) for a in self)


def _wave_vectors(grid: FFTGrid) -> _FieldVec:
    shape = grid.data.shape
    return _FieldVec(np.broadcast_to(c, shape) for c in grid.wave_vectors())


def _positions(grid: FFTGrid) -> _FieldVec:
    shape = grid.data.shape
    i, j, k = np.indices(shape, dtype=np.float64)
    return _FieldVec(
        (i + grid.local_0_start) * grid.dx[0],
        j * grid.dx[1],
        k * grid.dx[2],
    )


def _check_sizes(grid: FFTGrid, grids: tuple[FFTGrid, ...]) -> None:
    for other in grids:
        if any(other.size(d) != grid.size(d) for d in range(3)):
            raise ValueError(
                "grid extents differ: "
                f"{tuple(grid.size(d) for d in range(3))} and "
                f"{tuple(other.size(d) for d in range(3))}"
            )


def _store(grid: FFTGrid, values) -> None:
    data = grid.data
    if not np.iscomplexobj(data) and np.iscomplexobj(values):
        raise TypeError("cannot store complex values in a real field")
    data[...] = values


def apply_function_k(grid: FFTGrid, f: Callable) -> None:
    """Replace every Fourier mode x by f(x)."""
    _store(grid, f(grid.data))


def apply_function_r(grid: FFTGrid, f: Callable) -> None:
    """Replace every real-space value x by f(x)."""
    _store(grid, f(grid.data))


def apply_function_k_dep(grid: FFTGrid, f: Callable) -> None:
    """Replace every Fourier mode x by f(x, k), k being its wave vector."""
    _store(grid, f(grid.data, _wave_vectors(grid)))


def apply_function_r_dep(grid: FFTGrid, f: Callable) -> None:
    """Replace every real-space value x by f(x, r), r being its position."""
    _store(grid, f(grid.data, _positions(grid)))


def assign_function_of_grids_r(grid: FFTGrid, f: Callable, *args: FFTGrid) -> None:
    """Set grid to f(g1, g2, ...) evaluated on the other grids' values."""
    _check_sizes(grid, args)
    _store(grid, f(*(g.data for g in args)))


def assign_function_of_grids_k(grid: FFTGrid, f: Callable, *args: FFTGrid) -> None:
    """Set every Fourier mode to f(g1(k), g2(k), ...)."""
    _check_sizes(grid, args)
    _store(grid, f(*(g.data for g in args)))


def assign_function_of_grids_ijk(
    grid: FFTGrid, f: Callable, *args: FFTGrid
) -> None:
    """Set every mode to f((i, j, k), g1[ijk], ...), with index arrays."""
    _check_sizes(grid, args)
    ijk = tuple(np.indices(grid.data.shape))
    _store(grid, f(ijk, *(g.data for g in args)))


def assign_function_of_grids_kdep(
    grid: FFTGrid, f: Callable, *args: FFTGrid
) -> None:
    """Set every Fourier mode to f(k, g1(k), g2(k), ...)."""
    _check_sizes(grid, args)
    _store(grid, f(_wave_vectors(grid), *(g.data for g in args)))