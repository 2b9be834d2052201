"""
Coprime Pair Estimator
======================
The core implementation of the pi estimate.

Why is this file needed?
------------------------
1. Counting: It scans every ordered pair (a, b) in [1, N] x [1, N] and counts
   the coprime ones with a JIT-compiled GCD kernel.
2. Inversion: The share of coprime pairs tends to 6 / pi^2, so
   pi ~ sqrt(6 / probability).
3. Convergence: It runs the estimate for several N and plots the result.

Note: N <= 0 raises ValueError instead of yielding NaN/Inf.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import TYPE_CHECKING, Callable, Iterable

import numpy as np
import numba as nb
import matplotlib.pyplot as plt

from coprimepi.config import SWEEP_NS
from coprimepi.gcd import binary_gcd, euclid_gcd

if TYPE_CHECKING:
    from matplotlib.figure import Figure

logger = logging.getLogger(__name__)


@nb.njit(cache=True)
def _count_euclid(n: int) -> int:
    """Number of coprime ordered pairs in [1, n]^2 (Euclidean kernel)."""
    cnt = 0
    for a in range(1, n + 1):
        for b in range(1, n + 1):
            if euclid_gcd(a, b) == 1:
                cnt += 1
    return cnt

@nb.njit(cache=True)
def _count_binary(n: int) -> int:
    """Number of coprime ordered pairs in [1, n]^2 (binary kernel)."""
    cnt = 0
    for a in range(1, n + 1):
        for b in range(1, n + 1):
            if binary_gcd(a, b) == 1:
                cnt += 1
    return cnt


KERNELS: dict[str, Callable[[int], int]] = {
    "euclid": _count_euclid,
    "binary": _count_binary,
}


@dataclass(frozen=True)
class PiEstimate:
    n: int
    coprime_pairs: int
    total_pairs: int
    probability: float
    pi: float

    @property
    def error(self) -> float:
        """Absolute distance from math.pi."""
        return abs(self.pi - math.pi)


def _check_n(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise TypeError(f"Grid size must be an integer, got {type(n).__name__}: {n!r}.")
    if n < 1:
        raise ValueError(f"Grid size must be at least 1, got {n}. "
                         f"An empty grid has no coprime probability.")
    return int(n)


def _get_kernel(kernel: str) -> Callable[[int], int]:
    try:
        return KERNELS[kernel]
    except KeyError:
        raise ValueError(f"Unknown GCD kernel: {kernel!r}. "
                         f"'kernel' must be one of {sorted(KERNELS)}.") from None


def warm_up(kernel: str = "euclid") -> None:
    """Compile the counting kernel on a 1x1 grid so compilation is not timed."""
    _get_kernel(kernel)(1)


def count_coprime_pairs(n: int, kernel: str = "euclid") -> int:
    """
    Count the ordered pairs (a, b) with 1 <= a, b <= n and gcd(a, b) == 1.

    Args:
        n: Upper bound of the grid.
        kernel: GCD kernel, "euclid" or "binary".

    Raises:
        TypeError: If `n` is not an integer.
        ValueError: If `n` < 1 or `kernel` is unknown.

    Returns:
        The number of coprime pairs, between 1 and n**2.
    """
    n = _check_n(n)
    count = _get_kernel(kernel)
    logger.debug(f"Counting coprime pairs on a {n}x{n} grid ({kernel} kernel)")
    return int(count(n))


def estimate(n: int, kernel: str = "euclid") -> PiEstimate:
    """
    Estimate pi from the coprime pairs of the [1, n] x [1, n] grid.

    Args:
        n: Upper bound of the grid.
        kernel: GCD kernel, "euclid" or "binary".

    Returns:
        A PiEstimate with the count, the probability and the estimate.
    """
    coprime_pairs = count_coprime_pairs(n, kernel=kernel)
    n = int(n)
    # Float product: no integer truncation and no overflow for large n
    total = float(n) * float(n)
    probability = coprime_pairs / total
    pi = float(np.sqrt(6.0 / probability))
    return PiEstimate(
        n=n,
        coprime_pairs=coprime_pairs,
        total_pairs=n * n,
        probability=probability,
        pi=pi,
    )


def calc_pi(n: int, kernel: str = "euclid") -> float:
    """Approximate pi as sqrt(6 / P(coprime)) over the [1, n] x [1, n] grid."""
    return estimate(n, kernel=kernel).pi


def sweep(ns: Iterable[int] = SWEEP_NS, kernel: str = "euclid") -> list[PiEstimate]:
    """
    Run `estimate` for each grid size in `ns`, keeping the given order.
    """
    results: list[PiEstimate] = []
    for n in ns:
        result = estimate(n, kernel=kernel)
        logger.info(f"N={result.n}: pi ~ {result.pi:.6f} (error {result.error:.2e})")
        results.append(result)
    return results


def plot_sweep(results: list[PiEstimate], show: bool = True) -> Figure:
    """
    Plot the estimate against the grid size, with pi as reference.

    Args:
        results: Output of `sweep`.
        show: Call plt.show() after drawing.

    Returns:
        The matplotlib Figure.
    """
    ns = np.array([r.n for r in results], dtype=np.float64)
    pis = np.array([r.pi for r in results], dtype=np.float64)

    plt.rcParams["figure.constrained_layout.use"] = True
    fig = plt.figure(figsize=(7, 5))

    plt.semilogx(ns, pis, 'o-r', lw=2, label="sqrt(6 / P(coprime))")
    plt.axhline(np.pi, color='k', lw=1, linestyle='--', label="pi")

    plt.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
    plt.minorticks_on()
    plt.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

    plt.title("Coprime Pair Estimate of pi")
    plt.xlabel("N")
    plt.ylabel("Estimate")
    plt.legend()

    if show:
        plt.show()
    return fig
