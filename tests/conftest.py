import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo any logging setup a test (e.g. the CLI group) performed."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
