"""
Application Entry Point
=======================
Runs the pi estimate on the fixed grid and prints the result.

Output (stdout, exactly three lines):
    calcPi: <CPU seconds> seconds
    N: <N>
    pi: <estimate>
"""
import logging

from coprimepi import config
from coprimepi.dev import cpu_timed, timer
from coprimepi.estimator import calc_pi, warm_up
from coprimepi.logging_config import setup_logging

logger = logging.getLogger(__name__)


@timer
def main() -> None:
    # 1. Setup Logging (stderr)
    setup_logging(level=config.LOG_LEVEL)

    n = config.DEFAULT_N
    kernel = config.DEFAULT_KERNEL

    # 2. Compile the kernel outside the timed region
    warm_up(kernel)

    # 3. Timed run
    pi, cpu_seconds, wall_seconds = cpu_timed(calc_pi, n, kernel=kernel)
    logger.info(f"calcPi wall-clock time: {wall_seconds:.6f} s")

    print(f"calcPi: {cpu_seconds:f} seconds")
    print(f"N: {n}")
    print(f"pi: {pi:f}")


if __name__ == "__main__":
    main()
