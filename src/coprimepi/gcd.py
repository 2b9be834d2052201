# gcd.py
from __future__ import annotations

import numba as nb

# ---- JIT’d GCD kernels, callable from Python and from other kernels ----

@nb.njit(cache=True)
def euclid_gcd(a: int, b: int) -> int:
    """
    Greatest common divisor by the Euclidean algorithm.

    Args:
        a: First operand (a >= 0).
        b: Second operand (b >= 0, not both zero).

    Returns:
        gcd(a, b). If b == 0 the loop does not run and a is returned.
    """
    while b != 0:
        a, b = b, a % b
    return a

@nb.njit(cache=True)
def binary_gcd(a: int, b: int) -> int:
    """
    Greatest common divisor by Stein's binary algorithm (shifts and subtraction).

    Args:
        a: First operand (a >= 0).
        b: Second operand (b >= 0).

    Returns:
        gcd(a, b), with gcd(0, b) == b and gcd(a, 0) == a.
    """
    if a == 0:
        return b
    if b == 0:
        return a

    # Common factors of 2
    shift = 0
    while ((a | b) & 1) == 0:
        a >>= 1
        b >>= 1
        shift += 1

    while (a & 1) == 0:
        a >>= 1

    # a is odd from here on
    while b != 0:
        while (b & 1) == 0:
            b >>= 1
        if a > b:
            a, b = b, a
        b -= a

    return a << shift
