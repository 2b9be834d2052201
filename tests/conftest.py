import logging

import matplotlib
import pytest

matplotlib.use("Agg")


@pytest.fixture
def clean_package_logger():
    """Remove and close handlers added to the 'coprimepi' logger by a test."""
    logger = logging.getLogger("coprimepi")
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(level)
