"""
The coprimepi package estimates pi from the density of coprime integer pairs.
The GCD kernels are pure numba; the estimator also owns the matplotlib
convergence plot, and `main` owns the terminal output.
"""
from coprimepi.estimator import (
    KERNELS,
    PiEstimate,
    calc_pi,
    count_coprime_pairs,
    estimate,
    plot_sweep,
    sweep,
    warm_up,
)
from coprimepi.gcd import binary_gcd, euclid_gcd

__all__ = [
    "KERNELS",
    "PiEstimate",
    "binary_gcd",
    "calc_pi",
    "count_coprime_pairs",
    "estimate",
    "euclid_gcd",
    "plot_sweep",
    "sweep",
    "warm_up",
]

__version__ = "0.1.0"
