"""
Lexicographic Permutation Generator
===================================

Produces every permutation of [0, n) exactly once, from the identity
to the full reversal, in strict lexicographic (dictionary) order.

Author: Carmen Esteban
License: MIT
"""

from math import factorial


# 20! = 2,432,902,008,176,640,000 still fits a signed 64-bit counter; 21! does not.
MAX_GENERATOR_ORDER = 20


class PermutationIndexGenerator:
    """Dictionary-order permutation generator.

    next() returns the same list object on every call, updated in place.
    Copy it if it has to outlive the following call.

    Usage
    -----
    gen = PermutationIndexGenerator(4)
    while gen.has_next():
        perm = gen.next()
    """

    def __init__(self, n):
        if n < 1 or n > MAX_GENERATOR_ORDER:
            raise ValueError("Order must be between 1 and {}, got {}".format(
                MAX_GENERATOR_ORDER, n))
        self.n = n
        self.total = factorial(n)
        self._a = list(range(n))
        self._num_left = self.total

    @property
    def remaining(self):
        return self._num_left

    def has_next(self):
        return self._num_left != 0

    def next(self):
        if self._num_left == 0:
            raise StopIteration
        if self._num_left == self.total:
            self._num_left -= 1
            return self._a

        a = self._a

        # Largest j with a[j] < a[j + 1]
        j = len(a) - 2
        while a[j] > a[j + 1]:
            j -= 1

        # Smallest a[k] greater than a[j] to the right of j
        k = len(a) - 1
        while a[j] > a[k]:
            k -= 1

        a[j], a[k] = a[k], a[j]

        # Tail after j back into increasing order
        a[j + 1:] = a[:j:-1]

        self._num_left -= 1
        return a

    def __iter__(self):
        while self.has_next():
            yield tuple(self.next())

    def __len__(self):
        return self.total
