"""
Closed-form Rotation Orbit Counts
=================================

Burnside's lemma for the cyclic group C4 acting on n x n permutation
matrices by quarter turns.

Fixed points:
    |Fix(e)|    = n!
    |Fix(r)|    = (2m)! / m!   if n = 4m or 4m + 1, else 0
    |Fix(r^2)|  = 2^m * m!     with m = n // 2
    |Fix(r^3)|  = |Fix(r)|

An orbit of size 1 is fixed by r, an orbit of size 2 is fixed by r^2
only, every other orbit has size 4.

Author: Carmen Esteban
License: MIT
"""

from math import factorial


def fixed_by_quarter_turn(n):
    """Number of n x n permutation matrices unchanged by a 90 degree turn."""
    if n % 4 not in (0, 1):
        return 0
    m = n // 4
    return factorial(2 * m) // factorial(m)


def fixed_by_half_turn(n):
    """Number of n x n permutation matrices unchanged by a 180 degree turn."""
    m = n // 2
    return 2 ** m * factorial(m)


def expected_orbit_counts(n):
    """Orbit census of all n! permutation matrices under rotation.

    Parameters
    ----------
    n : int
        Matrix order, n >= 1.

    Returns
    -------
    dict
        'sole'   : orbits of size 1
        'twin'   : orbits of size 2
        'quad'   : orbits of size 4
        'orbits' : total number of orbits
    """
    if n < 1:
        raise ValueError("Order must be positive, got {}".format(n))
    total = factorial(n)
    fix90 = fixed_by_quarter_turn(n)
    fix180 = fixed_by_half_turn(n)

    sole = fix90
    twin = (fix180 - fix90) // 2
    quad = (total - fix180) // 4
    orbits = (total + 2 * fix90 + fix180) // 4
    assert sole + twin + quad == orbits
    return {'sole': sole, 'twin': twin, 'quad': quad, 'orbits': orbits}
