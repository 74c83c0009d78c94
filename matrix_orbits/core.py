"""Core definitions: Dot, MatrixImage, OrbitType."""

from collections import namedtuple
from enum import Enum

import numpy as np


# Base of the polynomial image key. Digits are columns in [0, N), so the
# encoding stays injective while N <= KEY_BASE.
KEY_BASE = 17


class OrbitInvariantError(RuntimeError):
    """An orbit census reached a state the rotation group cannot produce."""


class Dot(namedtuple("Dot", ["x", "y"])):
    """A marked cell: row x, column y. Orders by x, then y."""

    __slots__ = ()

    def __str__(self):
        return "({} {})".format(self.x, self.y)


class OrbitType(Enum):
    """Size of a rotation orbit, keyed by its isomorphic count."""

    SOLE = 1
    TWIN = 2
    QUAD = 4

    @classmethod
    def from_count(cls, count):
        try:
            return cls(count)
        except ValueError:
            raise OrbitInvariantError(
                "isomorphic count {} is not 1, 2 or 4".format(count)) from None


class MatrixImage:
    """A permutation matrix stored as one column index per row.

    dots[x] is the column of the marked cell in row x. The image key is
    computed lazily and cached until the dots change.
    """

    def __init__(self, size):
        self.dots = np.zeros(size, dtype=np.int64)
        self.isomorphic_count = 1
        self._key = None

    @classmethod
    def from_array(cls, indices):
        img = cls(len(indices))
        img.dots[:] = indices
        return img

    @property
    def size(self):
        return len(self.dots)

    def add_dot(self, x, y=None):
        if y is None:
            x, y = x
        self.dots[x] = y
        self._key = None

    def get_dots(self):
        return [Dot(x, y) for x, y in enumerate(self.dots.tolist())]

    def _rotated_dots(self):
        n = len(self.dots)
        shadow = np.empty_like(self.dots)
        shadow[n - 1 - self.dots] = np.arange(n)
        return shadow

    def rotate(self):
        """Return a new image turned by 90 degrees."""
        img = MatrixImage(len(self.dots))
        img.dots = self._rotated_dots()
        return img

    def rotate_self(self):
        self.dots = self._rotated_dots()
        self._key = None

    def rotations(self):
        """The 90, 180 and 270 degree turns of this image, in that order."""
        result = []
        current = self
        for _ in range(3):
            current = current.rotate()
            result.append(current)
        return result

    def image_key(self):
        """Canonical integer key: sum of dots[x] * 17**x."""
        if self._key is None:
            key = 0
            for d in reversed(self.dots.tolist()):
                key = key * KEY_BASE + d
            assert key >= 0, "image key must be non-negative"
            self._key = key
        return self._key

    def compare_with(self, other):
        """Dot-by-dot equality, independent of the cached key."""
        if other is None or len(self.dots) != len(other.dots):
            return False
        return bool(np.array_equal(self.dots, other.dots))

    def clone(self):
        img = MatrixImage(len(self.dots))
        img.dots = self.dots.copy()
        img.isomorphic_count = self.isomorphic_count
        img._key = self._key
        return img

    def inc_isomorphic_count(self):
        self.isomorphic_count += 1

    @property
    def orbit_type(self):
        return OrbitType.from_count(self.isomorphic_count)

    def imprint(self):
        """Union of the dots of this image and its three rotations."""
        n = len(self.dots)
        grid = np.zeros((n, n), dtype=bool)
        rows = np.arange(n)
        grid[rows, self.dots] = True
        for img in self.rotations():
            grid[rows, img.dots] = True
        return {Dot(int(x), int(y)) for x, y in np.argwhere(grid)}

    def __repr__(self):
        return "MatrixImage({}, count={})".format(
            self.dots.tolist(), self.isomorphic_count)
