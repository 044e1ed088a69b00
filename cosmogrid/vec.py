"""Small fixed-length vectors with elementwise arithmetic."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator


class Vec:
    """A mutable N-dimensional vector supporting basic arithmetic."""

    __slots__ = ("_data",)
    __hash__ = None  # mutable

    def __init__(self, *args):
        if (
            len(args) == 1
            and isinstance(args[0], Iterable)
            and not isinstance(args[0], (str, bytes))
        ):
            args = tuple(args[0])
        self._data = list(args)

    def __getitem__(self, i):
        return self._data[i]

    def __setitem__(self, i, value):
        self._data[i] = value

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"Vec({', '.join(repr(x) for x in self._data)})"

    def __eq__(self, other):
        if not isinstance(other, Vec):
            return NotImplemented
        return self._data == other._data

    def _check(self, other: Vec) -> None:
        if len(other) != len(self):
            raise ValueError(
                f"vector lengths differ: {len(self)} and {len(other)}"
            )

    def __add__(self, other):
        if not isinstance(other, Vec):
            return NotImplemented
        self._check(other)
        return Vec(a + b for a, b in zip(self._data, other._data))

    def __sub__(self, other):
        if not isinstance(other, Vec):
            return NotImplemented
        self._check(other)
        return Vec(a - b for a, b in zip(self._data, other._data))

    def __neg__(self):
        return Vec(-a for a in self._data)

    def __mul__(self, s):
        if isinstance(s, Vec):
            return NotImplemented
        return Vec(a * s for a in self._data)

    def __rmul__(self, s):
        if isinstance(s, Vec):
            return NotImplemented
        return Vec(a * s for a in self._data)

    def __truediv__(self, s):
        if isinstance(s, Vec):
            return NotImplemented
        return Vec(a / s for a in self._data)

    def __iadd__(self, other):
        if not isinstance(other, Vec):
            return NotImplemented
        self._check(other)
        self._data = [a + b for a, b in zip(self._data, other._data)]
        return self

    def __isub__(self, other):
        if not isinstance(other, Vec):
            return NotImplemented
        self._check(other)
        self._data = [a - b for a, b in zip(self._data, other._data)]
        return self

    def __imul__(self, s):
        if isinstance(s, Vec):
            return NotImplemented
        self._data = [a * s for a in self._data]
        return self

    def __itruediv__(self, s):
        if isinstance(s, Vec):
            return NotImplemented
        self._data = [a / s for a in self._data]
        return self

    def abs(self) -> Vec:
        """Return a vector of the absolute values of the components."""
        return Vec(math.fabs(a) for a in self._data)

    def norm_squared(self):
        """Return the squared Euclidean norm."""
        return sum(a * a for a in self._data)

    def norm(self) -> float:
        """Return the Euclidean norm."""
        return math.sqrt(self.norm_squared())