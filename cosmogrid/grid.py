"""Periodic three-dimensional grids that switch between real and Fourier space.

A grid owns one memory buffer that is viewed either as a real-space field
of shape ``(n0, n1, n2)`` or as its Fourier representation. Real-valued
fields use the half-complex layout of an in-place real-to-complex transform,
so the Fourier view has shape ``(n0, n1, n2 // 2 + 1)``. Transforms are
normalised symmetrically: both directions are scaled by ``1 / sqrt(N)``.
"""

from __future__ import annotations

import enum
import math
from typing import Sequence

import numpy as np

from .vec import Vec


class Space(enum.Enum):
    """Which representation a grid currently holds."""

    KSPACE = "kspace"
    RSPACE = "rspace"


class FFTGrid:
    """A periodic 3-D field that can be Fourier transformed in place."""

    def __init__(
        self,
        n: Sequence[int],
        length: Sequence[float],
        allocate: bool = True,
        space: Space = Space.RSPACE,
        complex_data: bool = False,
    ):
        n = tuple(int(x) for x in n)
        length = tuple(float(x) for x in length)
        if len(n) != 3 or len(length) != 3:
            raise ValueError("a grid needs exactly three dimensions")
        if any(x <= 0 for x in n):
            raise ValueError(f"grid sizes must be positive, got {n}")
        if any(not x > 0.0 for x in length):
            raise ValueError(f"box lengths must be positive, got {length}")

        self.n = n
        self.length = length
        self.space = Space(space)
        self.complex_data = bool(complex_data)
        self.dtype = np.complex128 if self.complex_data else np.float64

        self.nhalf = tuple(x // 2 for x in n)
        self.kfac = tuple(2.0 * math.pi / L for L in length)
        self.kny = tuple(kf * nn / 2 for kf, nn in zip(self.kfac, n))
        self.dx = tuple(L / nn for L, nn in zip(length, n))
        self.fft_norm_fac = 1.0 / math.sqrt(float(n[0]) * n[1] * n[2])

        if self.complex_data:
            self.npr = n[2]
            self.npc = n[2]
        else:
            self.npr = n[2] + 2
            self.npc = n[2] // 2 + 1

        self.local_0_start = 0
        self.local_1_start = 0
        self.local_0_size = n[0]
        self.local_1_size = n[1]
        self.global_range = ((0, 0, 0), n)

        self._buf: np.ndarray | None = None
        self._rview: np.ndarray | None = None
        self._kview: np.ndarray | None = None

        if allocate:
            self.allocate()

    # ------------------------------------------------------------------
    # memory management

    def allocate(self) -> None:
        """Allocate the zero-initialised storage buffer and its two views."""
        n0, n1, n2 = self.n
        if self.complex_data:
            self._buf = np.zeros(n0 * n1 * n2, dtype=np.complex128)
            self._rview = self._buf.reshape(n0, n1, n2)
            self._kview = self._rview
        else:
            self._buf = np.zeros((n2 + 2) * n1 * n0, dtype=np.float64)
            used = n0 * n1 * 2 * self.npc
            self._rview = self._buf[:used].reshape(n0, n1, 2 * self.npc)[:, :, :n2]
            self._kview = self._buf[:used].view(np.complex128).reshape(
                n0, n1, self.npc
            )

    def reset(self) -> None:
        """Release the storage buffer."""
        self._buf = None
        self._rview = None
        self._kview = None

    @property
    def is_allocated(self) -> bool:
        return self._buf is not None

    def _require_allocated(self) -> None:
        if self._buf is None:
            raise RuntimeError("grid is not allocated")

    @property
    def memsize(self) -> int:
        """Number of elements held in the storage buffer."""
        self._require_allocated()
        return self._buf.size

    @property
    def data(self) -> np.ndarray:
        """Writable view of the field in its current representation."""
        self._require_allocated()
        return self._kview if self.space is Space.KSPACE else self._rview

    # ------------------------------------------------------------------
    # sizes and coordinates

    def size(self, i: int) -> int:
        """Local extent of dimension i; index 3 is the padded memory extent."""
        if not 0 <= i < 4:
            raise IndexError(f"dimension index {i} out of range")
        n0, n1, n2 = self.n
        if self.space is Space.RSPACE:
            sizes = (n0, n1, n2, self.npr)
        else:
            sizes = (n0, n1, self.npc, self.npc)
        return sizes[i]

    def global_size(self) -> int:
        """Total number of real-space cells."""
        n0, n1, n2 = self.n
        return n0 * n1 * n2

    def zero(self) -> None:
        """Set every stored element to zero."""
        self._require_allocated()
        self._buf[:] = 0

    def copy_from(self, other: FFTGrid) -> None:
        """Copy another grid's data, adopting its representation."""
        if other.space is not self.space:
            if self.space is Space.KSPACE:
                self.fourier_transform_backward(False)
            else:
                self.fourier_transform_forward(False)
        if self.n != other.n:
            raise ValueError(f"grid sizes differ: {self.n} and {other.n}")
        if self.complex_data != other.complex_data:
            raise ValueError("grids hold different data types")
        self._require_allocated()
        other._require_allocated()
        self._buf[:] = other._buf

    def get_r(self, i, j, k) -> Vec:
        """Physical position of cell (i, j, k)."""
        return Vec(
            float(i + self.local_0_start) * self.dx[0],
            float(j) * self.dx[1],
            float(k) * self.dx[2],
        )

    def get_unit_r(self, i, j, k) -> Vec:
        """Position of cell (i, j, k) in units of the box size."""
        return Vec(
            float(i + self.local_0_start) / self.n[0],
            float(j) / self.n[1],
            float(k) / self.n[2],
        )

    def get_unit_r_shifted(self, i, j, k, s) -> Vec:
        """Position of cell (i, j, k) shifted by s cells, in box units."""
        return Vec(
            (float(i + self.local_0_start) + s[0]) / self.n[0],
            (float(j) + s[1]) / self.n[1],
            (float(k) + s[2]) / self.n[2],
        )

    def get_cell_idx_1d(self, i, j, k) -> int:
        """Flat row-major index of real-space cell (i, j, k)."""
        return ((i + self.local_0_start) * self.n[1] + j) * self.n[2] + k

    def _wavenumber(self, idx, dim: int) -> float:
        folded = float(idx) - float(idx > self.nhalf[dim]) * self.n[dim]
        return folded * self.kfac[dim]

    def get_k(self, i, j, k) -> Vec:
        """Wave vector of Fourier mode (i, j, k)."""
        return Vec(
            self._wavenumber(i, 0),
            self._wavenumber(j, 1),
            self._wavenumber(k, 2),
        )

    def wave_vectors(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Broadcastable wave-vector components for the current layout."""
        comps = []
        for dim in range(3):
            idx = np.arange(self.size(dim))
            k = (idx - (idx > self.nhalf[dim]) * self.n[dim]) * self.kfac[dim]
            shape = [1, 1, 1]
            shape[dim] = idx.size
            comps.append(k.astype(np.float64).reshape(shape))
        return comps[0], comps[1], comps[2]

    def is_nyquist_mode(self, i, j, k) -> bool:
        """Whether mode (i, j, k) lies on a Nyquist plane."""
        if self.space is not Space.KSPACE:
            raise RuntimeError("Nyquist modes are only defined in Fourier space")
        return (
            i + self.local_1_start == self.n[1] // 2
            or j == self.n[0] // 2
            or k == self.n[2] // 2
        )

    def gradient(self, idim: int, ijk) -> complex:
        """Fourier-space gradient operator i*k along idim; zero at Nyquist."""
        idx = ijk[idim]
        if idx != self.nhalf[idim]:
            rgrad = self._wavenumber(idx, idim)
        else:
            rgrad = 0.0
        return complex(0.0, rgrad)

    def laplacian(self, ijk) -> float:
        """Fourier-space Laplacian operator -|k|^2 for mode ijk."""
        return -self.get_k(ijk[0], ijk[1], ijk[2]).norm_squared()

    # ------------------------------------------------------------------
    # arithmetic

    def __imul__(self, x):
        self.data[...] *= x
        return self

    def __itruediv__(self, x):
        self.data[...] /= x
        return self

    # ------------------------------------------------------------------
    # transforms

    def apply_norm(self) -> None:
        """Multiply the whole buffer by the transform normalisation factor."""
        self._require_allocated()
        self._buf *= self.fft_norm_fac

    def fourier_transform_forward(self, do_transform: bool = True) -> None:
        """Switch to Fourier space, transforming the data unless told not to."""
        if self.space is Space.KSPACE:
            return
        self._require_allocated()
        if do_transform:
            if self.complex_data:
                self._kview[...] = np.fft.fftn(self._rview)
            else:
                self._kview[...] = np.fft.rfftn(self._rview)
            self.apply_norm()
        self.space = Space.KSPACE

    def fourier_transform_backward(self, do_transform: bool = True) -> None:
        """Switch to real space, transforming the data unless told not to."""
        if self.space is Space.RSPACE:
            return
        self._require_allocated()
        if do_transform:
            if self.complex_data:
                self._rview[...] = np.fft.ifftn(self._kview, norm="forward")
            else:
                self._rview[...] = np.fft.irfftn(
                    self._kview, s=self.n, norm="forward"
                )
            self.apply_norm()
        self.space = Space.RSPACE

    def zero_dc_mode(self) -> None:
        """Remove the mean: zero the k=0 mode or subtract the real-space mean."""
        self._require_allocated()
        if self.space is Space.KSPACE:
            self._kview[0, 0, 0] = 0.0
        else:
            self._rview[...] -= self._rview.mean()