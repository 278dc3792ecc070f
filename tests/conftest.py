import logging

import pytest


@pytest.fixture(autouse=True)
def reset_salon_logger():
    """CLI runs attach handlers bound to CliRunner's streams; drop them."""
    yield
    logger = logging.getLogger("salon")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
