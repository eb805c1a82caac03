import logging

import pytest


@pytest.fixture(autouse=True)
def reset_arena_logger():
    yield
    logger = logging.getLogger("arena")
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
