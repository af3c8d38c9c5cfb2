import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))
import pytest

from log import logger


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
