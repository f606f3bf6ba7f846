from __future__ import annotations

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_loguru():
    yield
    # CLI tests install sinks bound to captured streams and tmp dirs
    logger.remove()
