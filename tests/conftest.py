import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / 'src'
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture
def captured_logs():
    """Collects rendered ``lzi`` log messages, debug level included."""
    from lzi.logging import logger

    messages: list = []
    handler_id = logger.add(messages.append, level = 'DEBUG', format = '{extra[event]}|{message}', filter = lambda r: 'event' in r['extra'])
    try:
        yield messages
    finally:
        logger.remove(handler_id)
