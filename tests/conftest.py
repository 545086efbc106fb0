import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_logging():
    """CLI tests reconfigure the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    logging.disable(logging.NOTSET)
    root.handlers[:] = handlers
    root.setLevel(level)
