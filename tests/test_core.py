"""
MatrixImage: rotation, key, imprint and orbit type.

Author: Carmen Esteban
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from matrix_orbits.core import (
    Dot, MatrixImage, OrbitInvariantError, OrbitType, KEY_BASE,
)
from matrix_orbits.permutations import PermutationIndexGenerator


def _images(n):
    return [MatrixImage.from_array(p) for p in PermutationIndexGenerator(n)]


def test_rotate_quarter_turn():
    img = MatrixImage.from_array([0, 1])
    assert img.rotate().dots.tolist() == [1, 0]
    img = MatrixImage.from_array([0, 1, 2, 3])
    assert img.rotate().dots.tolist() == [3, 2, 1, 0]
    img = MatrixImage.from_array([0])
    assert img.rotate().dots.tolist() == [0]


def test_four_rotations_return_original():
    for n in range(1, 7):
        for img in _images(n):
            r = img
            for _ in range(4):
                r = r.rotate()
            assert r.compare_with(img)


def test_rotate_self_matches_rotate_and_resets_key():
    img = MatrixImage.from_array([1, 2, 0, 3])
    expected = img.rotate()
    old_key = img.image_key()
    img.rotate_self()
    assert img.compare_with(expected)
    assert img.image_key() == expected.image_key()
    assert img.image_key() != old_key


def test_rotations_are_successive_turns():
    img = MatrixImage.from_array([2, 0, 3, 1, 4])
    r1, r2, r3 = img.rotations()
    assert r1.compare_with(img.rotate())
    assert r2.compare_with(img.rotate().rotate())
    assert r3.compare_with(img.rotate().rotate().rotate())
    assert img.dots.tolist() == [2, 0, 3, 1, 4]


def test_image_key_polynomial():
    img = MatrixImage.from_array([2, 0, 1])
    assert img.image_key() == 2 + 0 * KEY_BASE + 1 * KEY_BASE ** 2
    assert MatrixImage.from_array([0, 1, 2, 3]).image_key() == 17 + 2 * 289 + 3 * 4913


def test_image_key_injective():
    for n in range(1, 9):
        keys = [img.image_key() for img in _images(n)]
        assert len(set(keys)) == len(keys)
        assert min(keys) >= 0


def test_image_key_reset_by_add_dot():
    img = MatrixImage(2)
    img.add_dot(0, 0)
    img.add_dot(1, 1)
    assert img.image_key() == 17
    img.add_dot(Dot(0, 1))
    img.add_dot(Dot(1, 0))
    assert img.image_key() == 1


def test_compare_with():
    a = MatrixImage.from_array([1, 0, 2])
    assert a.compare_with(MatrixImage.from_array([1, 0, 2]))
    assert not a.compare_with(MatrixImage.from_array([0, 1, 2]))
    assert not a.compare_with(MatrixImage.from_array([1, 0]))
    assert not a.compare_with(None)


def test_clone_is_independent():
    a = MatrixImage.from_array([1, 0, 2])
    a.inc_isomorphic_count()
    b = a.clone()
    assert b.compare_with(a)
    assert b.isomorphic_count == 2
    b.rotate_self()
    assert a.dots.tolist() == [1, 0, 2]


def test_get_dots():
    img = MatrixImage.from_array([2, 0, 1])
    assert img.get_dots() == [Dot(0, 2), Dot(1, 0), Dot(2, 1)]
    assert str(Dot(1, 2)) == "(1 2)"
    assert sorted([Dot(1, 0), Dot(0, 2), Dot(0, 1)]) == [Dot(0, 1), Dot(0, 2), Dot(1, 0)]


def test_imprint_bounds():
    for n in range(1, 7):
        for img in _images(n):
            k = len(img.imprint())
            assert n <= k <= 4 * n
            fixed = img.rotate().compare_with(img)
            assert (k == n) == fixed
            if n % 2 == 0:
                assert k % 4 == 0


def test_imprint_examples():
    # identity and reversal of order 4: half-turn symmetric, disjoint
    assert len(MatrixImage.from_array([0, 1, 2, 3]).imprint()) == 8
    # fixed by a quarter turn
    sole = MatrixImage.from_array([1, 3, 0, 2])
    assert sole.imprint() == set(sole.get_dots())
    # two dots in the same cell orbit
    assert len(MatrixImage.from_array([1, 2, 0, 3]).imprint()) == 12
    # odd order: the centre cell is shared by all rotations
    assert len(MatrixImage.from_array([0, 1, 2]).imprint()) == 5
    assert len(MatrixImage.from_array([1, 0, 2, 3]).imprint()) == 16


def test_orbit_type_from_count():
    img = MatrixImage.from_array([0, 1])
    assert img.orbit_type is OrbitType.SOLE
    img.inc_isomorphic_count()
    assert img.orbit_type is OrbitType.TWIN
    img.inc_isomorphic_count()
    with pytest.raises(OrbitInvariantError):
        img.orbit_type
    img.inc_isomorphic_count()
    assert img.orbit_type is OrbitType.QUAD
    with pytest.raises(OrbitInvariantError):
        OrbitType.from_count(0)


if __name__ == "__main__":
    failed = 0
    for name, fn in sorted(globals().items()):
        if name.startswith("test_") and callable(fn):
            try:
                fn()
                print("  [PASS] {}".format(name))
            except AssertionError as e:
                failed += 1
                print("  [FAIL] {}: {}".format(name, e))
    sys.exit(1 if failed else 0)
