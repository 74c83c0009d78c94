"""
Rotation Orbit Registry
=======================

Drives the permutation generator, wraps each permutation as a
MatrixImage and groups the images into orbits of the quarter-turn
rotation group.

Classes:
    OrbitCensus    -- result of one generate() run: key -> representative map
                      plus Sole / Twin / Quad counters
    OrbitRegistry  -- runs the generator for one matrix order

Author: Carmen Esteban
License: MIT
"""

import json
import time
from dataclasses import dataclass, field
from math import factorial
from typing import Dict, Optional

from matrix_orbits.core import MatrixImage, OrbitInvariantError, OrbitType
from matrix_orbits.permutations import PermutationIndexGenerator
from matrix_orbits.symmetry import expected_orbit_counts


# Largest order the registry accepts; the generator itself goes up to 20.
MAX_REGISTRY_ORDER = 16

PROGRESS_INTERVAL = 1000


@dataclass
class OrbitCensus:
    """All representatives found for one matrix order.

    In unique mode each rotation orbit has exactly one representative, the
    first member the generator produced. In full mode every permutation is
    its own entry.
    """
    order: int
    unique: bool = True
    images: Dict[int, MatrixImage] = field(default_factory=dict)
    n_sole: int = 0
    n_twin: int = 0
    n_quad: int = 0
    elapsed: float = 0.0

    def count(self):
        return len(self.images)

    def representatives(self):
        return list(self.images.values())

    def add_image(self, img):
        self.images[img.image_key()] = img

    def add_unique_image(self, img):
        """Insert img unless one of its rotations is already registered.

        Returns True when img becomes a new representative, False when it
        was merged into an existing orbit.
        """
        for rotated in img.rotations():
            now = self.images.get(rotated.image_key())
            if now is not None:
                now.inc_isomorphic_count()
                return False
        self.images[img.image_key()] = img
        return True

    def classify(self):
        """Count Sole, Twin and Quad representatives.

        Raises OrbitInvariantError if an isomorphic count is outside
        {1, 2, 4} or the orbit sizes do not add up to n!.
        """
        counts = {OrbitType.SOLE: 0, OrbitType.TWIN: 0, OrbitType.QUAD: 0}
        for img in self.images.values():
            try:
                counts[img.orbit_type] += 1
            except OrbitInvariantError as e:
                raise OrbitInvariantError("{}, key = {}".format(
                    e, img.image_key())) from None
        self.n_sole = counts[OrbitType.SOLE]
        self.n_twin = counts[OrbitType.TWIN]
        self.n_quad = counts[OrbitType.QUAD]

        covered = self.n_sole + 2 * self.n_twin + 4 * self.n_quad
        if covered != factorial(self.order):
            raise OrbitInvariantError(
                "orbits cover {} images, expected {}! = {}".format(
                    covered, self.order, factorial(self.order)))

    def verify(self):
        """Compare unique-mode counters against the Burnside closed form."""
        if not self.unique:
            raise ValueError("verify() needs a unique-mode census")
        expected = expected_orbit_counts(self.order)
        found = {'sole': self.n_sole, 'twin': self.n_twin,
                 'quad': self.n_quad, 'orbits': self.count()}
        return {
            'expected': expected,
            'found': found,
            'all_pass': expected == found,
        }

    def summary(self):
        d = {
            'order': self.order,
            'mode': 'unique' if self.unique else 'all',
            'images': self.count(),
            'elapsed': round(self.elapsed, 4),
        }
        if self.unique:
            d['sole'] = self.n_sole
            d['twin'] = self.n_twin
            d['quad'] = self.n_quad
        return d

    def to_json(self):
        return json.dumps(self.summary(), indent=2)


class OrbitRegistry:
    """Finds the rotation orbits of all permutation matrices of order n.

    Usage
    -----
    registry = OrbitRegistry(4)
    census = registry.generate(unique=True)
    census.count(), census.n_sole, census.n_twin, census.n_quad
    """

    def __init__(self, n):
        if n < 1 or n > MAX_REGISTRY_ORDER:
            raise ValueError("Order must be between 1 and {}, got {}".format(
                MAX_REGISTRY_ORDER, n))
        self.size = n
        self.census: Optional[OrbitCensus] = None

    def count(self):
        return self.census.count() if self.census is not None else 0

    def add_unique_image(self, img):
        if self.census is None or not self.census.unique:
            self.census = OrbitCensus(self.size, unique=True)
        return self.census.add_unique_image(img)

    def generate(self, unique=True, verbose=False):
        """Generate all images for this order of matrix.

        Parameters
        ----------
        unique : bool
            True keeps one representative per rotation orbit,
            False keeps every image.
        verbose : bool
            Print progress every 1000 permutations.

        Returns
        -------
        OrbitCensus
        """
        t0 = time.time()
        census = OrbitCensus(self.size, unique=unique)
        self.census = census

        pc = PermutationIndexGenerator(self.size)
        cnt = 0
        while pc.has_next():
            img = MatrixImage.from_array(pc.next())
            if unique:
                census.add_unique_image(img)
            else:
                census.add_image(img)
            cnt += 1
            if verbose and cnt % PROGRESS_INTERVAL == 0:
                print("{} -> {}".format(cnt, census.count()))

        if unique:
            census.classify()
        census.elapsed = time.time() - t0
        return census
