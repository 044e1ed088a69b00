"""Copy fields between grids of different resolution by Fourier interpolation."""

from __future__ import annotations

import numpy as np

from .grid import FFTGrid


def _mode_map(n_from: int, n_to: int) -> tuple[np.ndarray, np.ndarray]:
    """Target and source indices of the modes that exist on both grids."""
    left = min(n_from // 2, n_to // 2)
    right = max(n_from - n_to // 2, n_from // 2)
    right_recv = right + n_to - n_from
    recv = np.array(
        [i for i in range(n_to) if i < left or i > right_recv], dtype=np.intp
    )
    send = np.where(recv < left, recv, recv + n_from - n_to)
    return recv, send


def fourier_interpolate_copy(source: FFTGrid, target: FFTGrid) -> None:
    """Copy source into target, resampling in Fourier space if sizes differ.

    Both grids end up in Fourier space. Modes that the two grids do not
    share, including the Nyquist planes, are left zero in the target.
    """
    source.fourier_transform_forward(True)
    target.fourier_transform_forward(False)

    if source.n == target.n:
        target.copy_from(source)
        return

    target.zero()

    irecv, isend = _mode_map(source.n[0], target.n[0])
    jrecv, jsend = _mode_map(source.n[1], target.n[1])
    nk = min(source.n[2] // 2, target.n[2] // 2)
    ks = np.arange(nk, dtype=np.intp)

    target.data[np.ix_(irecv, jrecv, ks)] = source.data[np.ix_(isend, jsend, ks)]