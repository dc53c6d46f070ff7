import logging

import pytest


@pytest.fixture
def logger() -> logging.Logger:
    logger = logging.getLogger('taxteller.tests')
    logger.setLevel(logging.DEBUG)
    return logger
