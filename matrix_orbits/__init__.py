"""
Matrix Orbits
=============

Enumerates all n x n permutation matrices and groups them into orbits
of the quarter-turn rotation group.

Orbit types:
  Sole - unchanged by a 90 degree turn (orbit of size 1)
  Twin - unchanged by a 180 degree turn only (orbit of size 2)
  Quad - all four rotations differ (orbit of size 4)

Author: Carmen Esteban
License: MIT
"""

__version__ = "0.1.0"
__author__ = "Carmen Esteban"

from matrix_orbits.core import Dot, MatrixImage, OrbitType, OrbitInvariantError
from matrix_orbits.permutations import PermutationIndexGenerator
from matrix_orbits.registry import OrbitCensus, OrbitRegistry
from matrix_orbits.symmetry import (
    expected_orbit_counts,
    fixed_by_quarter_turn,
    fixed_by_half_turn,
)
from matrix_orbits.report import (
    render_image,
    render_dots,
    render_census,
    imprint_report,
    census_summary,
    census_table,
)
