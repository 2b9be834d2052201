"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (grid size, kernel name) scattered
   throughout the code.
2. Reproducibility: The program has no external configuration surface, so the
   values used for a run are exactly the values listed here.

Exports:
    DEFAULT_N (int): Upper bound of the [1, N] x [1, N] pair grid.
    DEFAULT_KERNEL (str): GCD kernel used by the entry point.
    SWEEP_NS (tuple[int, ...]): Grid sizes for a convergence study.
    LOG_LEVEL (int): Level passed to `setup_logging` by the entry point.
"""
import logging

DEFAULT_N: int = 10000
DEFAULT_KERNEL: str = "euclid"
SWEEP_NS: tuple[int, ...] = (100, 1000, 10000)
LOG_LEVEL: int = logging.WARNING
